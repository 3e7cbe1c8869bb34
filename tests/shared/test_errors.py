from variant_availability.shared.errors import (
    AvailabilityError,
    CombinationShapeError,
    ConfigurationError,
    ErrorCode,
    ValueNotFoundError,
)


def test_value_not_found_log_extra():
    err = ValueNotFoundError("Purple", option_name="Color", position=0, known_values=["Red"])
    assert err.to_log_extra() == {
        "error_code": ErrorCode.VALUE_NOT_FOUND,
        "value": "Purple",
        "option_name": "Color",
        "position": 0,
    }
    assert isinstance(err, AvailabilityError)
    assert isinstance(err, LookupError)


def test_value_not_found_without_context():
    err = ValueNotFoundError("Purple")
    assert str(err) == "Option value 'Purple' not found in product options"
    assert err.to_log_extra() == {"error_code": ErrorCode.VALUE_NOT_FOUND, "value": "Purple"}


def test_shape_error_carries_counts_and_details():
    err = CombinationShapeError(3, 2, details="no selection for options: Fit")
    assert isinstance(err, ValueError)
    assert err.to_log_extra() == {
        "error_code": ErrorCode.SHAPE_MISMATCH,
        "details": "no selection for options: Fit",
        "expected": 3,
        "actual": 2,
    }
    assert "no selection for options: Fit" in str(err)


def test_configuration_error_code():
    err = ConfigurationError("bad")
    assert err.to_log_extra() == {"error_code": ErrorCode.CONFIG}
    assert isinstance(err, ValueError)
