# 📦 variant_availability/domain/options/entities.py
"""
📦 Іммʼютабельні сутності каталогу опцій товару.

🔹 `ProductOption` — назва опції + впорядкований кортеж значень (порядок задає індекси).
🔹 `SelectedOption` — поточне обране значення однієї опції.
🔹 `ProductVariant` — запис варіанта для альтернативного матчера (лінійний перебір).
🔹 Типи `IndexVector` / `OptionCatalog` для сигнатур доменних сервісів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування створення сутностей
from dataclasses import dataclass, field                            # 🧱 Опис сутностей
from typing import Iterable, Mapping, Optional, Sequence, Tuple     # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from variant_availability.shared.utils.logger import LOG_NAME       # 🏷️ Базове імʼя логера

# ================================
# 🪵 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.options.entities")   # 🧾 Модульний логер


# ================================
# 🧾 ПУБЛІЧНІ ТИПИ (АЛІАСИ)
# ================================
IndexVector = Tuple[int, ...]                                       # 🔢 Одна комбінація як позиції значень
OptionCatalog = Sequence["ProductOption"]                           # 📚 Впорядкований перелік опцій товару


# ================================
# 🏷️ ОПЦІЯ ТОВАРУ
# ================================
@dataclass(frozen=True, slots=True)
class ProductOption:
    """
    Вісь конфігурації товару (Color, Size, ...).

    Порядок `values` визначає значення індексу: `values[i]` ↔ індекс `i`.
    Списки, передані у конструктор, заморожуються у кортеж.
    """

    name: str                                                       # 🏷️ Назва опції
    values: Tuple[str, ...] = ()                                    # 📋 Дозволені значення у порядку каталогу

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))      # 🧊 Кортеж замість списку
        logger.debug("🏷️ ProductOption створено | name=%s values=%d", self.name, len(self.values))

    def index_of(self, value: str) -> Optional[int]:
        """Позиція значення за точною рівністю рядків або None."""
        try:
            return self.values.index(value)
        except ValueError:
            return None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "ProductOption":
        """Будує опцію з dict вигляду `{"name": ..., "values": [...]}`."""
        raw_values = data.get("values") or ()
        if isinstance(raw_values, str):                             # 🛡️ Рядок — не послідовність значень
            raw_values = (raw_values,)
        return cls(name=str(data.get("name", "")), values=tuple(str(v) for v in raw_values))  # type: ignore[union-attr]


def catalog_from_mappings(items: Iterable[Mapping[str, object]]) -> Tuple[ProductOption, ...]:
    """Конвертує сирі dict-и (наприклад, з JSON API) у кортеж `ProductOption`."""
    catalog = tuple(ProductOption.from_mapping(item) for item in items)
    logger.debug("📚 Каталог опцій зібрано | options=%d", len(catalog))
    return catalog


# ================================
# ✅ ОБРАНІ ЗНАЧЕННЯ ТА ВАРІАНТИ
# ================================
@dataclass(frozen=True, slots=True)
class SelectedOption:
    """Обране значення однієї опції."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class ProductVariant:
    """Один варіант товару з набором обраних опцій та ознакою доступності."""

    selected_options: Tuple[SelectedOption, ...] = field(default_factory=tuple)
    available_for_sale: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected_options", tuple(self.selected_options))

    @property
    def values(self) -> Tuple[str, ...]:
        """Значення опцій варіанта у порядку `selected_options`."""
        return tuple(option.value for option in self.selected_options)

    def value_for(self, option_name: str) -> Optional[str]:
        """Значення варіанта для опції за назвою або None."""
        for option in self.selected_options:
            if option.name == option_name:
                return option.value
        return None


__all__ = [
    "IndexVector",
    "OptionCatalog",
    "ProductOption",
    "SelectedOption",
    "ProductVariant",
    "catalog_from_mappings",
]
