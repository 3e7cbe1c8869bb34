# 📦 variant_availability/infrastructure/facades/availability_facade.py
"""
📦 Функціональна точка входу `is_option_value_present` поверх процесного кешу.

🔹 Без явного кешу використовує `get_default_cache()` (без ліміту, живе весь процес).
🔹 Для керованого життєвого циклу передайте власний `DecodeCache` через `cache=`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging															# 🧾 Логування фасаду
from typing import Optional, Sequence									# 🧰 Типи

# 🧩 Внутрішні модулі проєкту
from variant_availability.domain.availability.matchers import EncodedAvailabilityMatcher  # ⚖️ Строга стратегія
from variant_availability.domain.options.entities import OptionCatalog	# 📚 Каталог
from variant_availability.infrastructure.cache.decode_cache import (	# 💾 Кеш
    DecodeCache,
    get_default_cache,
)
from variant_availability.shared.utils.logger import LOG_NAME			# 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.facades.availability")


def is_option_value_present(
    target_values: Sequence[str],
    encoded: str,
    catalog: OptionCatalog,
    *,
    cache: Optional[DecodeCache] = None,
) -> bool:
    """
    🔗 Чи присутня комбінація значень у закодованому рядку товару.

    Args:
        target_values: Значення опцій у порядку каталогу.
        encoded: Закодований рядок доступності/існування варіантів.
        catalog: Опції товару.
        cache: Кеш декодованих множин; за замовчуванням — процесний.

    Raises:
        ValueNotFoundError: значення відсутнє в каталозі.
    """
    provider = cache if cache is not None else get_default_cache()		# 💾 Обираємо кеш
    return EncodedAvailabilityMatcher(provider).is_available(target_values, encoded, catalog)


__all__ = ["is_option_value_present"]
