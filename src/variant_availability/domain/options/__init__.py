# 📦 variant_availability/domain/options/__init__.py
"""📦 Сутності каталогу опцій: `ProductOption`, `SelectedOption`, `ProductVariant`."""

from .entities import (
    IndexVector,
    OptionCatalog,
    ProductOption,
    ProductVariant,
    SelectedOption,
    catalog_from_mappings,
)

__all__ = [
    "IndexVector",
    "OptionCatalog",
    "ProductOption",
    "ProductVariant",
    "SelectedOption",
    "catalog_from_mappings",
]
