# 🧰 variant_availability/shared/utils/__init__.py
"""
🧰 Пакет спільних утиліт: наразі лише узгоджене логування.
"""

from __future__ import annotations

# 🔠 Логування
from .logger import (
    LOG_NAME,
    JsonFormatter,
    get_logger,
    init_logging,
    init_logging_from_config,
    to_level,
)

# ================================
# 📦 ЕКСПОРТ ПАКЕТУ
# ================================
__all__ = [
    "LOG_NAME",
    "JsonFormatter",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
    "to_level",
]
