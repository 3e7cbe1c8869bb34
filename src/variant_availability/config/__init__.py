# ⚙️ variant_availability/config/__init__.py
"""⚙️ Конфігурація: опції ядра та сервіс файлів/ENV."""

from .config_service import CONFIG_DIR_ENV, ConfigService
from .options import DEFAULT_AVAILABILITY_OPTIONS, AvailabilityOptions

__all__ = [
    "CONFIG_DIR_ENV",
    "ConfigService",
    "DEFAULT_AVAILABILITY_OPTIONS",
    "AvailabilityOptions",
]
