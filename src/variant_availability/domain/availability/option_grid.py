# 🎛️ variant_availability/domain/availability/option_grid.py
"""
🎛️ Сітка доступності значень опцій для селектора варіантів.

Для кожної опції з більш ніж одним значенням бере поточний вибір, підставляє кожне
значення опції по черзі і питає стратегію, чи доступна така комбінація.
Посилання/рядки запиту тут не будуються — лише стан значень.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                        # 🧾 Логування побудови сітки
from dataclasses import dataclass                                     # 🧱 DTO
from typing import List, Optional, Sequence, Tuple                    # 🧰 Типи

# 🧩 Внутрішні модулі
from variant_availability.domain.availability.interfaces import IAvailabilityMatcher  # ⚖️ Стратегія
from variant_availability.domain.options.entities import (            # 📦 Сутності
    OptionCatalog,
    SelectedOption,
)
from variant_availability.shared.errors import CombinationShapeError  # 🚨 Неповний вибір
from variant_availability.shared.utils.logger import LOG_NAME         # 🏷️ Глобальний префікс логера

logger = logging.getLogger(f"{LOG_NAME}.domain.availability.option_grid")


# ================================
# 🏛️ DTO
# ================================
@dataclass(frozen=True, slots=True)
class OptionValueState:
    """Стан одного значення опції."""

    value: str
    is_available: bool
    is_active: bool


@dataclass(frozen=True, slots=True)
class OptionAvailability:
    """Опція з поточним значенням та станами всіх її значень."""

    name: str
    value: Optional[str]
    values: Tuple[OptionValueState, ...]

    @property
    def available_values(self) -> Tuple[str, ...]:
        return tuple(state.value for state in self.values if state.is_available)


# ================================
# 🛠️ ХЕЛПЕРИ
# ================================
def _selection_values(
    catalog: OptionCatalog,
    selected_options: Sequence[SelectedOption],
) -> List[str]:
    """Впорядковує обрані значення за каталогом; кожна опція має бути обрана."""
    by_name = {option.name: option.value for option in selected_options}
    missing = [option.name for option in catalog if option.name not in by_name]
    if missing:
        raise CombinationShapeError(
            expected=len(catalog),
            actual=len(catalog) - len(missing),
            details=f"no selection for options: {', '.join(missing)}",
        )
    return [by_name[option.name] for option in catalog]


# ================================
# 🎛️ ПОБУДОВА СІТКИ
# ================================
def build_option_grid(
    catalog: OptionCatalog,
    selected_options: Sequence[SelectedOption],
    matcher: IAvailabilityMatcher,
) -> List[OptionAvailability]:
    """
    Будує стан кожного значення для опцій, де є вибір (більше одного значення).

    Args:
        catalog: Опції товару.
        selected_options: Поточний вибір (по одному значенню на кожну опцію каталогу).
        matcher: Стратегія наявності, вже привʼязана до даних товару.

    Raises:
        CombinationShapeError: вибір не покриває всі опції каталогу.
        ValueNotFoundError: обране значення відсутнє в каталозі (строга стратегія).
    """
    current = _selection_values(catalog, selected_options)
    grid: List[OptionAvailability] = []

    for position, option in enumerate(catalog):
        if len(option.values) <= 1:                                   # 🚫 Нема з чого обирати
            continue

        states: List[OptionValueState] = []
        for candidate in option.values:
            target = list(current)
            target[position] = candidate                              # 🔁 Підставляємо кандидата
            states.append(
                OptionValueState(
                    value=candidate,
                    is_available=matcher.is_available(target, catalog),
                    is_active=candidate == current[position],
                )
            )
        grid.append(OptionAvailability(name=option.name, value=current[position], values=tuple(states)))

    logger.debug("🎛️ option grid built | options=%d policy=%s", len(grid), getattr(matcher, "policy", "?"))
    return grid


__all__ = ["OptionValueState", "OptionAvailability", "build_option_grid"]
