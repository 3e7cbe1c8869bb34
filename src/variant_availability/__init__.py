# 🧩 variant_availability/__init__.py
"""
🧩 Ядро перевірки наявності варіантів товару за закодованим рядком комбінацій.

🔹 `decode_option_values` — рядок → комбінації індексів.
🔹 `resolve_indices` — значення опцій → індекси у каталозі.
🔹 `DecodeCache` + `EncodedAvailabilityMatcher` — строга перевірка з одноразовим декодуванням.
🔹 `VariantScanMatcher` — альтернативна політика (немає запису → доступно).
🔹 `is_option_value_present` — функціональна точка входу поверх процесного кешу.
"""

from variant_availability.config import AvailabilityOptions, ConfigService
from variant_availability.config.setup import AvailabilityContainer
from variant_availability.domain.availability import (
    BoundEncodedMatcher,
    EncodedAvailabilityMatcher,
    IAvailabilityMatcher,
    OptionAvailability,
    OptionValueState,
    VariantScanMatcher,
    build_matcher,
    build_option_grid,
    canonical_key,
    decode_option_values,
    decode_to_set,
    resolve_indices,
)
from variant_availability.domain.options import (
    ProductOption,
    ProductVariant,
    SelectedOption,
    catalog_from_mappings,
)
from variant_availability.infrastructure.cache import DecodeCache, get_default_cache
from variant_availability.infrastructure.facades import is_option_value_present
from variant_availability.shared.errors import (
    AvailabilityError,
    CombinationShapeError,
    ConfigurationError,
    ValueNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "AvailabilityContainer",
    "AvailabilityOptions",
    "ConfigService",
    "BoundEncodedMatcher",
    "EncodedAvailabilityMatcher",
    "IAvailabilityMatcher",
    "OptionAvailability",
    "OptionValueState",
    "VariantScanMatcher",
    "build_matcher",
    "build_option_grid",
    "canonical_key",
    "decode_option_values",
    "decode_to_set",
    "resolve_indices",
    "ProductOption",
    "ProductVariant",
    "SelectedOption",
    "catalog_from_mappings",
    "DecodeCache",
    "get_default_cache",
    "is_option_value_present",
    "AvailabilityError",
    "CombinationShapeError",
    "ConfigurationError",
    "ValueNotFoundError",
]
