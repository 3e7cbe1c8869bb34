# 🧾 variant_availability/config/options.py
"""
🧾 Опції ядра перевірки наявності.

🔹 `cache_max_entries` — межа LRU для кешу декодування (None → без межі).
🔹 `log_level` — рівень логера пакета (None → не чіпати).
🔹 `metrics_enabled` — чи оновлювати Prometheus-метрики кешу.

Джерела: ENV з префіксом `AVAILABILITY_`, секція `availability` у config.yaml, явні аргументи.
Рядкові значення (ENV, .env) проходять через м'які конвертери: сміття → попередження і дефолт.
Явно передані некоректні значення → `ConfigurationError`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from variant_availability.shared.errors import ConfigurationError
from variant_availability.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config.options")

DEFAULT_ENV_PREFIX = "AVAILABILITY_"

_TRUTHY = frozenset({"1", "true", "yes", "on", "y", "t"})
_FALSY = frozenset({"0", "false", "no", "off", "n", "f"})
_UNBOUNDED = frozenset({"", "0", "none", "unbounded"})
_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


# ================================
# 🔀 М'ЯКІ КОНВЕРТЕРИ РЯДКІВ
# ================================
def _soft_bool(raw: str, fallback: bool) -> bool:
    token = raw.strip().lower()
    if token in _TRUTHY:
        return True
    if token in _FALSY:
        return False
    logger.warning("⚠️ '%s' is not a boolean, using %s", raw, fallback)
    return fallback


def _soft_limit(raw: str, fallback: Optional[int]) -> Optional[int]:
    token = raw.strip().lower()
    if token in _UNBOUNDED:
        return None
    if not token.isdigit():                                      # 🚫 Відʼємні та нечислові
        logger.warning("⚠️ '%s' is not a valid cache limit, using %s", raw, fallback)
        return fallback
    return int(token)


def _soft_level(raw: str, fallback: Optional[str]) -> Optional[str]:
    token = raw.strip().upper()
    if not token:
        return fallback
    if token not in _LEVELS:
        logger.warning("⚠️ Unknown log level '%s', using %s", raw, fallback)
        return fallback
    return token


_SOFT: Dict[str, Callable[[str, Any], Any]] = {
    "cache_max_entries": _soft_limit,
    "log_level": _soft_level,
    "metrics_enabled": _soft_bool,
}                                                                 # 🗂️ Поле → конвертер рядка


# ================================
# 🧱 МОДЕЛЬ
# ================================
@dataclass(frozen=True, slots=True)
class AvailabilityOptions:
    """🧱 Незмінні опції; перевіряються одразу при створенні."""

    cache_max_entries: Optional[int] = None
    log_level: Optional[str] = None
    metrics_enabled: bool = True

    def __post_init__(self) -> None:
        limit = self.cache_max_entries
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
            raise ConfigurationError(
                "cache_max_entries must be a positive int or None",
                details=f"got {limit!r}",
            )
        if self.log_level is not None and str(self.log_level).upper() not in _LEVELS:
            raise ConfigurationError(
                "log_level must be a standard logging level name",
                details=f"got {self.log_level!r}, expected one of {', '.join(_LEVELS)}",
            )

    @classmethod
    def default(cls) -> "AvailabilityOptions":
        return cls()

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX) -> "AvailabilityOptions":
        """🌱 `<prefix>CACHE_MAX_ENTRIES`, `<prefix>LOG_LEVEL`, `<prefix>METRICS_ENABLED`."""
        raw = {
            name: os.environ[f"{prefix}{name.upper()}"]
            for name in _SOFT
            if f"{prefix}{name.upper()}" in os.environ
        }
        options = cls.from_dict(raw)
        logger.debug("🌱 options from env (prefix=%s): %s", prefix, options.to_kwargs())
        return options

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "AvailabilityOptions":
        """🧾 Зі словника конфігу; невідомі ключі ігноруються, `0` як ліміт → без межі."""
        defaults = cls.default().to_kwargs()
        values: Dict[str, Any] = {}
        for name, soften in _SOFT.items():
            if name not in (data or {}):
                continue
            value = data[name]
            if isinstance(value, str):
                value = soften(value, defaults[name])
            values[name] = value
        if values.get("cache_max_entries") == 0:
            values["cache_max_entries"] = None
        return cls(**values)

    def merge(self, **overrides: Any) -> "AvailabilityOptions":
        """🔀 Нова копія; `None` в overrides означає «лишити як є»."""
        combined = self.to_kwargs()
        combined.update({key: value for key, value in overrides.items() if value is not None})
        return AvailabilityOptions.from_dict(combined)

    def to_kwargs(self) -> Dict[str, Any]:
        return {field_.name: getattr(self, field_.name) for field_ in fields(self)}

    def effective_log_level(self) -> int:
        """🎚️ Числовий рівень; без явного рівня → INFO."""
        if self.log_level is None:
            return logging.INFO
        return getattr(logging, str(self.log_level).upper())


DEFAULT_AVAILABILITY_OPTIONS = AvailabilityOptions.default()

__all__ = ["AvailabilityOptions", "DEFAULT_AVAILABILITY_OPTIONS", "DEFAULT_ENV_PREFIX"]
