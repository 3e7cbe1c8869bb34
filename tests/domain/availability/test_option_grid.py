import pytest

from variant_availability.domain.availability.matchers import EncodedAvailabilityMatcher, VariantScanMatcher
from variant_availability.domain.availability.option_grid import build_option_grid
from variant_availability.domain.options import ProductOption, ProductVariant, SelectedOption
from variant_availability.infrastructure.cache import DecodeCache
from variant_availability.shared.errors import CombinationShapeError, ValueNotFoundError


@pytest.fixture
def strict_matcher():
    # Red: S, L; Blue: M
    return EncodedAvailabilityMatcher(DecodeCache(metrics_enabled=False)).bind("0:0,2,,1:1 ")


def _selection(color, size):
    return [SelectedOption("Color", color), SelectedOption("Size", size)]


def test_grid_marks_available_and_active_values(catalog, strict_matcher):
    grid = build_option_grid(catalog, _selection("Red", "S"), strict_matcher)

    assert [option.name for option in grid] == ["Color", "Size"]

    color, size = grid
    assert color.value == "Red"
    assert [(s.value, s.is_available, s.is_active) for s in color.values] == [
        ("Red", True, True),
        ("Blue", False, False),
    ]
    assert [(s.value, s.is_available, s.is_active) for s in size.values] == [
        ("S", True, True),
        ("M", False, False),
        ("L", True, False),
    ]
    assert size.available_values == ("S", "L")


def test_grid_swaps_only_the_evaluated_option(catalog, strict_matcher):
    grid = build_option_grid(catalog, _selection("Blue", "M"), strict_matcher)
    color, size = grid
    assert color.available_values == ("Blue",)
    assert size.available_values == ("M",)


def test_single_value_options_are_skipped():
    catalog = (
        ProductOption("Color", ("Red", "Blue")),
        ProductOption("Material", ("Cotton",)),
    )
    matcher = EncodedAvailabilityMatcher(DecodeCache(metrics_enabled=False)).bind("0:0,,1:0 ")
    selection = [SelectedOption("Color", "Red"), SelectedOption("Material", "Cotton")]

    grid = build_option_grid(catalog, selection, matcher)
    assert [option.name for option in grid] == ["Color"]


def test_selection_order_does_not_matter(catalog, strict_matcher):
    selection = [SelectedOption("Size", "L"), SelectedOption("Color", "Red")]
    color, size = build_option_grid(catalog, selection, strict_matcher)
    assert color.value == "Red"
    assert size.value == "L"


def test_missing_selection_is_rejected(catalog, strict_matcher):
    with pytest.raises(CombinationShapeError) as exc_info:
        build_option_grid(catalog, [SelectedOption("Color", "Red")], strict_matcher)
    assert "Size" in str(exc_info.value)


def test_unknown_selected_value_propagates(catalog, strict_matcher):
    with pytest.raises(ValueNotFoundError):
        build_option_grid(catalog, _selection("Purple", "S"), strict_matcher)


def test_grid_with_variant_scan_defaults_to_available(catalog):
    matcher = VariantScanMatcher(
        [
            ProductVariant(
                selected_options=(SelectedOption("Color", "Blue"), SelectedOption("Size", "S")),
                available_for_sale=False,
            )
        ]
    )
    color, _size = build_option_grid(catalog, _selection("Red", "S"), matcher)
    assert [(s.value, s.is_available) for s in color.values] == [("Red", True), ("Blue", False)]
