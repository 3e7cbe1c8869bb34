import logging
import os
from contextlib import contextmanager

import pytest

from variant_availability.config.options import AvailabilityOptions
from variant_availability.shared.errors import ConfigurationError


@contextmanager
def _env(**pairs):
    old = {k: os.environ.get(k) for k in pairs}
    try:
        for k, v in pairs.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = str(v)
        yield
    finally:
        for k, v in old.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v


def test_defaults_when_env_empty():
    with _env(
        AVAILABILITY_CACHE_MAX_ENTRIES=None,
        AVAILABILITY_LOG_LEVEL=None,
        AVAILABILITY_METRICS_ENABLED=None,
    ):
        opts = AvailabilityOptions.from_env()
        assert opts.cache_max_entries is None
        assert opts.log_level is None
        assert opts.metrics_enabled is True
        assert opts.effective_log_level() == logging.INFO


def test_override_with_default_prefix():
    with _env(
        AVAILABILITY_CACHE_MAX_ENTRIES="128",
        AVAILABILITY_LOG_LEVEL="debug",
        AVAILABILITY_METRICS_ENABLED="off",
    ):
        opts = AvailabilityOptions.from_env()
        assert opts.cache_max_entries == 128
        assert opts.log_level == "DEBUG"
        assert opts.metrics_enabled is False
        assert opts.effective_log_level() == logging.DEBUG


def test_custom_prefix():
    with _env(SHOP_CACHE_MAX_ENTRIES="7", AVAILABILITY_CACHE_MAX_ENTRIES=None):
        opts = AvailabilityOptions.from_env(prefix="SHOP_")
        assert opts.cache_max_entries == 7


@pytest.mark.parametrize("raw", ["0", "none", "unbounded", ""])
def test_unbounded_spellings(raw):
    with _env(AVAILABILITY_CACHE_MAX_ENTRIES=raw):
        assert AvailabilityOptions.from_env().cache_max_entries is None


def test_invalid_values_fall_back_to_defaults():
    with _env(
        AVAILABILITY_CACHE_MAX_ENTRIES="-5",
        AVAILABILITY_LOG_LEVEL="loud",
        AVAILABILITY_METRICS_ENABLED="maybe",
    ):
        # from_env не кидає — некоректні значення замінюються дефолтами
        opts = AvailabilityOptions.from_env()
        assert opts.cache_max_entries is None
        assert opts.log_level is None
        assert opts.metrics_enabled is True


def test_non_numeric_limit_falls_back():
    with _env(AVAILABILITY_CACHE_MAX_ENTRIES="lots"):
        assert AvailabilityOptions.from_env().cache_max_entries is None


@pytest.mark.parametrize(
    "kwargs",
    [{"cache_max_entries": 0}, {"cache_max_entries": -1}, {"cache_max_entries": True}, {"log_level": "LOUD"}],
)
def test_explicit_invalid_values_raise(kwargs):
    with pytest.raises(ConfigurationError):
        AvailabilityOptions(**kwargs)


def test_from_dict_ignores_unknown_keys_and_coerces_strings():
    opts = AvailabilityOptions.from_dict(
        {"cache_max_entries": "32", "metrics_enabled": "false", "colour": "red"}
    )
    assert opts.cache_max_entries == 32
    assert opts.metrics_enabled is False


def test_from_dict_zero_means_unbounded():
    assert AvailabilityOptions.from_dict({"cache_max_entries": 0}).cache_max_entries is None
    assert AvailabilityOptions.from_dict(None) == AvailabilityOptions.default()


def test_merge_returns_new_instance():
    base = AvailabilityOptions.default()
    merged = base.merge(cache_max_entries=16, log_level=None)
    assert merged.cache_max_entries == 16
    assert merged.log_level is None
    assert base.cache_max_entries is None
    assert merged.to_kwargs() == {"cache_max_entries": 16, "log_level": None, "metrics_enabled": True}
