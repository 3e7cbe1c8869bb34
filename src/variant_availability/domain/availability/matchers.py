# ⚖️ variant_availability/domain/availability/matchers.py
"""
⚖️ Дві незалежні стратегії перевірки наявності комбінації.

🔹 `EncodedAvailabilityMatcher` — строгий: комбінація доступна лише якщо її індекси є
   в декодованій множині. Відсутність = недоступно.
🔹 `VariantScanMatcher` — лінійний перебір записів варіантів; якщо варіант не знайдено,
   комбінація вважається доступною (default-available).
🔹 `build_matcher` обирає стратегію за тим, яке джерело даних передано.

❗ Модуль не створює кешів сам: джерело декодованих множин інʼєктується.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                        # 🧾 Логування рішень матчерів
from typing import Optional, Sequence, Tuple                          # 🧰 Типи

# 🧩 Внутрішні модулі
from variant_availability.domain.availability.decoder import canonical_key      # 🔑 Канонічний ключ
from variant_availability.domain.availability.index_resolver import resolve_indices  # 🔎 Значення → індекси
from variant_availability.domain.availability.interfaces import (   # 🧩 Контракти
    IAvailabilityMatcher,
    IDecodedSetProvider,
)
from variant_availability.domain.options.entities import (            # 📦 Сутності
    OptionCatalog,
    ProductVariant,
)
from variant_availability.shared.errors import CombinationShapeError  # 🚨 Помилка форми
from variant_availability.shared.utils.logger import LOG_NAME         # 🏷️ Глобальний префікс логера


# ================================
# 🧾 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.availability.matchers")

POLICY_ENCODED = "encoded"                                            # 🏷️ Строга політика
POLICY_VARIANT_SCAN = "variant_scan"                                  # 🏷️ Перебір варіантів


# ================================
# 🔐 СТРОГИЙ МАТЧЕР (ЗАКОДОВАНИЙ РЯДОК)
# ================================
class EncodedAvailabilityMatcher:
    """Відповідає на питання наявності через декодовану множину комбінацій."""

    def __init__(self, provider: IDecodedSetProvider) -> None:
        self._provider = provider                                      # 💾 Кеш/джерело множин

    def is_available(
        self,
        target_values: Sequence[str],
        encoded: str,
        catalog: OptionCatalog,
    ) -> bool:
        """
        Args:
            target_values: Значення опцій у порядку каталогу.
            encoded: Закодований рядок доступних комбінацій товару.
            catalog: Опції товару.

        Returns:
            bool: True лише якщо комбінація присутня в декодованій множині.

        Raises:
            ValueNotFoundError: значення відсутнє в каталозі (пробрасується без змін).
        """
        indices = resolve_indices(target_values, catalog)             # 🔎 Може підняти ValueNotFoundError
        decoded = self._provider.get_or_decode(encoded)               # 💾 Одне декодування на рядок
        result = canonical_key(indices) in decoded
        logger.debug("⚖️ encoded match | indices=%s result=%s", indices, result)
        return result

    def bind(self, encoded: str) -> "BoundEncodedMatcher":
        """Привʼязує закодований рядок, повертаючи стратегію з уніфікованим API."""
        return BoundEncodedMatcher(self, encoded)


class BoundEncodedMatcher:
    """`EncodedAvailabilityMatcher` з уже привʼязаним рядком одного товару."""

    policy = POLICY_ENCODED

    def __init__(self, matcher: EncodedAvailabilityMatcher, encoded: str) -> None:
        self._matcher = matcher
        self.encoded = encoded

    def is_available(self, target_values: Sequence[str], catalog: OptionCatalog) -> bool:
        return self._matcher.is_available(target_values, self.encoded, catalog)


# ================================
# 🔁 АЛЬТЕРНАТИВНИЙ МАТЧЕР (ПЕРЕБІР ВАРІАНТІВ)
# ================================
class VariantScanMatcher:
    """
    Перебирає записи варіантів. Перший варіант, значення якого збігаються з цільовою
    комбінацією, визначає відповідь через `available_for_sale`.
    Якщо такого варіанта немає → True.
    """

    policy = POLICY_VARIANT_SCAN

    def __init__(self, variants: Sequence[ProductVariant]) -> None:
        self._variants: Tuple[ProductVariant, ...] = tuple(variants)

    def find_variant(
        self,
        target_values: Sequence[str],
        catalog: OptionCatalog,
    ) -> Optional[ProductVariant]:
        """Шукає варіант, у якого кожна опція каталогу має цільове значення."""
        if len(target_values) != len(catalog):
            raise CombinationShapeError(expected=len(catalog), actual=len(target_values))
        for variant in self._variants:
            if all(
                variant.value_for(option.name) == value
                for option, value in zip(catalog, target_values)
            ):
                return variant
        return None

    def is_available(self, target_values: Sequence[str], catalog: OptionCatalog) -> bool:
        variant = self.find_variant(target_values, catalog)
        result = True if variant is None else bool(variant.available_for_sale)
        logger.debug(
            "🔁 variant scan | values=%s found=%s result=%s",
            list(target_values),
            variant is not None,
            result,
        )
        return result


# ================================
# 🧭 ВИБІР СТРАТЕГІЇ
# ================================
def build_matcher(
    provider: IDecodedSetProvider,
    *,
    encoded: Optional[str] = None,
    variants: Optional[Sequence[ProductVariant]] = None,
) -> IAvailabilityMatcher:
    """
    Обирає стратегію за наявним джерелом даних.

    Закодований рядок (навіть порожній) → строгий матчер; інакше — перебір варіантів.
    """
    if encoded is not None:
        logger.debug("🧭 build_matcher -> %s", POLICY_ENCODED)
        return EncodedAvailabilityMatcher(provider).bind(encoded)
    logger.debug("🧭 build_matcher -> %s (variants=%d)", POLICY_VARIANT_SCAN, len(variants or ()))
    return VariantScanMatcher(variants or ())


__all__ = [
    "POLICY_ENCODED",
    "POLICY_VARIANT_SCAN",
    "EncodedAvailabilityMatcher",
    "BoundEncodedMatcher",
    "VariantScanMatcher",
    "build_matcher",
]
