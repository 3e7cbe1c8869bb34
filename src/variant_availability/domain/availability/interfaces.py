# 🧩 variant_availability/domain/availability/interfaces.py
"""
🧩 Контракти домену перевірки наявності.

🔹 `IDecodedSetProvider` — джерело декодованих множин (реалізує `DecodeCache`).
🔹 `IAvailabilityMatcher` — стратегія "чи доступна комбінація" з уже привʼязаним джерелом даних.
🔹 Чисті Protocol-и без I/O, лише сигнатури.
"""

from __future__ import annotations                                                   # ⏳ Дозволяємо посилання на типи нижче

# 🔠 Системні імпорти
from typing import FrozenSet, Protocol, Sequence, runtime_checkable                 # 🧰 Типи та Protocol

# 🧩 Внутрішні модулі
from variant_availability.domain.options.entities import OptionCatalog              # 📚 Каталог опцій


# ================================
# 🏛️ ДЖЕРЕЛО ДЕКОДОВАНИХ МНОЖИН
# ================================
@runtime_checkable
class IDecodedSetProvider(Protocol):
    """Повертає множину канонічних ключів для закодованого рядка."""

    def get_or_decode(self, encoded: str) -> FrozenSet[str]:
        ...


# ================================
# 🏛️ СТРАТЕГІЯ МАТЧИНГУ
# ================================
@runtime_checkable
class IAvailabilityMatcher(Protocol):
    """
    💧 Стратегія відповіді на питання "чи доступна комбінація".
    Джерело даних (закодований рядок або перелік варіантів) привʼязане під час створення.
    """

    @property
    def policy(self) -> str:                                                          # 🏷️ Назва політики
        ...

    def is_available(self, target_values: Sequence[str], catalog: OptionCatalog) -> bool:
        ...


__all__ = ["IDecodedSetProvider", "IAvailabilityMatcher"]
