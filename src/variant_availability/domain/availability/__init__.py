# 🧩 variant_availability/domain/availability/__init__.py
"""
🧩 Пакет `domain.availability`: резолвер індексів, декодер, матчери та сітка значень.

🔹 `index_resolver.py` — значення опцій → позиції у каталозі.
🔹 `decoder.py` — закодований рядок → комбінації / множина канонічних ключів.
🔹 `matchers.py` — строга стратегія (закодований рядок) та перебір варіантів.
🔹 `option_grid.py` — стан кожного значення опцій для селектора.
"""

from .decoder import canonical_key, decode_option_values, decode_to_set
from .index_resolver import resolve_indices
from .interfaces import IAvailabilityMatcher, IDecodedSetProvider
from .matchers import (
    POLICY_ENCODED,
    POLICY_VARIANT_SCAN,
    BoundEncodedMatcher,
    EncodedAvailabilityMatcher,
    VariantScanMatcher,
    build_matcher,
)
from .option_grid import OptionAvailability, OptionValueState, build_option_grid


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    "canonical_key",
    "decode_option_values",
    "decode_to_set",
    "resolve_indices",
    "IAvailabilityMatcher",
    "IDecodedSetProvider",
    "POLICY_ENCODED",
    "POLICY_VARIANT_SCAN",
    "BoundEncodedMatcher",
    "EncodedAvailabilityMatcher",
    "VariantScanMatcher",
    "build_matcher",
    "OptionAvailability",
    "OptionValueState",
    "build_option_grid",
]
