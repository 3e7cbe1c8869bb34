import logging

import pytest

from variant_availability.config.config_service import ConfigService
from variant_availability.config.setup.container import AvailabilityContainer
from variant_availability.shared.utils.logger import LOG_NAME


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    for name in (
        "AVAILABILITY_CACHE_MAX_ENTRIES",
        "AVAILABILITY_LOG_LEVEL",
        "AVAILABILITY_METRICS_ENABLED",
        "AVAILABILITY_LOG_FILE",
        "VARIANT_AVAILABILITY_CONFIG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("variant_availability.config.config_service.load_dotenv", lambda: False)
    ConfigService.reset()
    yield
    ConfigService.reset()


def test_bundled_defaults_are_loaded():
    cfg = ConfigService()
    assert cfg.get("availability.cache_max_entries") == 0
    assert cfg.get("availability.metrics_enabled") is True
    assert cfg.get("missing.key", "fallback") == "fallback"


def test_singleton_until_reset(tmp_path):
    first = ConfigService()
    assert ConfigService() is first
    ConfigService.reset()
    assert ConfigService(tmp_path) is not first


def test_yaml_overrides_json(tmp_path):
    (tmp_path / "config.json").write_text(
        '{"availability": {"cache_max_entries": 10, "log_level": "WARNING"}}', encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("availability:\n  cache_max_entries: 20\n", encoding="utf-8")

    cfg = ConfigService(tmp_path)
    assert cfg.get("availability.cache_max_entries") == 20
    assert cfg.get("availability.log_level") == "WARNING"


def test_env_overrides_files(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("availability:\n  cache_max_entries: 20\n", encoding="utf-8")
    monkeypatch.setenv("AVAILABILITY_CACHE_MAX_ENTRIES", "5")

    cfg = ConfigService(tmp_path)
    assert cfg.get("availability.cache_max_entries") == "5"
    assert cfg.section("availability") == {"cache_max_entries": "5"}


def test_config_dir_from_env(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("availability:\n  metrics_enabled: false\n", encoding="utf-8")
    monkeypatch.setenv("VARIANT_AVAILABILITY_CONFIG_DIR", str(tmp_path))

    assert ConfigService().get("availability.metrics_enabled") is False


def test_broken_yaml_is_logged_not_raised(tmp_path):
    (tmp_path / "config.yaml").write_text("availability: [unclosed\n", encoding="utf-8")
    cfg = ConfigService(tmp_path)
    assert cfg.section("availability") == {}


def test_container_from_config(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("availability:\n  cache_max_entries: 3\n", encoding="utf-8")
    monkeypatch.setenv("AVAILABILITY_METRICS_ENABLED", "0")

    container = AvailabilityContainer.from_config(ConfigService(tmp_path))
    assert container.options.cache_max_entries == 3
    assert container.options.metrics_enabled is False
    assert container.cache.max_entries == 3


def test_bundled_config_leaves_package_log_level_alone():
    package_logger = logging.getLogger(LOG_NAME)
    before = package_logger.level
    try:
        package_logger.setLevel(logging.WARNING)
        container = AvailabilityContainer.from_config(ConfigService())

        assert container.options.log_level is None
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.setLevel(before)
