# 🚨 variant_availability/shared/errors.py
"""
🚨 Ієрархія помилок ядра перевірки наявності.

🔹 `AvailabilityError` — базовий виняток з `message`/`details` та `to_log_extra()` для logger.extra.
🔹 `ValueNotFoundError` — значення опції відсутнє в каталозі (успадковує `LookupError`).
🔹 `CombinationShapeError` / `ConfigurationError` — помилки форми комбінації та налаштувань (`ValueError`).

❗ Декодер не піднімає структурних помилок: некоректні числові фрагменти стають 0.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення винятків
from typing import Dict, Optional, Sequence, Tuple					# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from variant_availability.shared.utils.logger import LOG_NAME		# 🏷️ Базове імʼя логера


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.shared.errors")				# 🧾 Локальний логер


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Стабільні коди для logger.extra та зовнішніх обробників."""

    VALUE_NOT_FOUND = "value_not_found"								# 🔎 Значення відсутнє в каталозі
    SHAPE_MISMATCH = "shape_mismatch"									# 📐 Довжина комбінації ≠ кількості опцій
    CONFIG = "config_error"											# ⚙️ Некоректні налаштування
    UNKNOWN = "unknown_error"											# ❓ Резервний код


# ================================
# 🧠 БАЗОВИЙ ВИНЯТОК
# ================================
class AvailabilityError(Exception):
    """🧠 Базовий виняток пакета."""

    error_code: str = ErrorCode.UNKNOWN								# 🏷️ Код за замовчуванням

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message											# 🗒️ Людиночитне повідомлення
        self.details = details											# 🔍 Технічні деталі (опційно)

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для logger.extra."""
        extra: Dict[str, object] = {"error_code": self.error_code}		# 🧾 Код помилки
        if self.details:												# 🔍 Деталі лише за наявності
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# ================================
# 🔎 ПОМИЛКИ РЕЗОЛВЕРА ІНДЕКСІВ
# ================================
class ValueNotFoundError(AvailabilityError, LookupError):
    """🔎 Значення цільової комбінації відсутнє у каталозі відповідної опції."""

    error_code = ErrorCode.VALUE_NOT_FOUND

    def __init__(
        self,
        value: str,
        *,
        option_name: Optional[str] = None,
        position: Optional[int] = None,
        known_values: Sequence[str] = (),
    ) -> None:
        where = f" for option {option_name!r}" if option_name else ""
        super().__init__(f"Option value {value!r} not found in product options{where}")
        self.value = value												# 🧾 Проблемне значення
        self.option_name = option_name									# 🏷️ Назва опції
        self.position = position										# 📍 Позиція у комбінації
        self.known_values: Tuple[str, ...] = tuple(known_values)		# 📋 Що є в каталозі
        logger.debug(
            "🔎 ValueNotFoundError created",
            extra={"value": value, "option_name": option_name, "position": position},
        )

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["value"] = self.value
        if self.option_name is not None:
            extra["option_name"] = self.option_name
        if self.position is not None:
            extra["position"] = self.position
        return extra


class CombinationShapeError(AvailabilityError, ValueError):
    """📐 Кількість значень у комбінації не збігається з кількістю опцій каталогу."""

    error_code = ErrorCode.SHAPE_MISMATCH

    def __init__(self, expected: int, actual: int, *, details: Optional[str] = None) -> None:
        super().__init__(
            f"Combination has {actual} values, product declares {expected} options",
            details=details,
        )
        self.expected = expected										# 📏 Кількість опцій у каталозі
        self.actual = actual											# 📏 Кількість значень у комбінації

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra.update({"expected": self.expected, "actual": self.actual})
        return extra


class ConfigurationError(AvailabilityError, ValueError):
    """⚙️ Некоректне значення в налаштуваннях."""

    error_code = ErrorCode.CONFIG


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "AvailabilityError",
    "ValueNotFoundError",
    "CombinationShapeError",
    "ConfigurationError",
]
