# 📦 variant_availability/config/setup/container.py
"""
📦 Контейнер залежностей ядра перевірки наявності.

🔹 Створює один `DecodeCache` за опціями та строгий матчер поверх нього.
🔹 Обирає стратегію для товару (`matcher_for`) та будує сітку значень (`option_grid`).
🔹 `from_config` читає секції `availability`/`logging` з `ConfigService`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from typing import List, Optional, Sequence                              # 🧮 Допоміжні типи

# ⚙️ Конфігурація
from variant_availability.config.config_service import ConfigService     # ⚙️ Файли + ENV
from variant_availability.config.options import AvailabilityOptions      # 🧾 Опції ядра

# 🏭 Доменна логіка
from variant_availability.domain.availability.interfaces import IAvailabilityMatcher  # ⚖️ Контракт стратегії
from variant_availability.domain.availability.matchers import (          # ⚖️ Стратегії
    EncodedAvailabilityMatcher,
    build_matcher,
)
from variant_availability.domain.availability.option_grid import (       # 🎛️ Сітка значень
    OptionAvailability,
    build_option_grid,
)
from variant_availability.domain.options.entities import (               # 📦 Сутності
    OptionCatalog,
    ProductVariant,
    SelectedOption,
)

# 💾 Інфраструктура
from variant_availability.infrastructure.cache.decode_cache import DecodeCache  # 💾 Кеш декодування
from variant_availability.shared.utils.logger import (                   # 🧾 Логування
    LOG_NAME,
    init_logging_from_config,
)

logger = logging.getLogger(f"{LOG_NAME}.config.setup.container")


class AvailabilityContainer:
    """🧰 Збирає кеш і стратегії в правильному порядку."""

    def __init__(
        self,
        options: Optional[AvailabilityOptions] = None,
        *,
        cache: Optional[DecodeCache] = None,
    ) -> None:
        self.options = options or AvailabilityOptions.default()          # 🧾 Опції ядра
        self.cache = cache if cache is not None else DecodeCache(         # 💾 Порожній кеш теж валідний (len == 0)
            max_entries=self.options.cache_max_entries,
            metrics_enabled=self.options.metrics_enabled,
        )
        self.encoded_matcher = EncodedAvailabilityMatcher(self.cache)     # ⚖️ Строга стратегія
        if self.options.log_level is not None:                            # 🎚️ Рівень бібліотеки лише якщо заданий
            logging.getLogger(LOG_NAME).setLevel(self.options.effective_log_level())
        logger.info(
            "📦 AvailabilityContainer готовий | max_entries=%s metrics=%s",
            self.options.cache_max_entries or "unbounded",
            self.options.metrics_enabled,
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[ConfigService] = None,
        *,
        configure_logging: bool = False,
    ) -> "AvailabilityContainer":
        """⚙️ Будує контейнер із `ConfigService` (секція `availability`)."""
        cfg = config or ConfigService()
        if configure_logging:                                            # 🪵 Логування лише за явним запитом
            init_logging_from_config(cfg.section("logging"))
        return cls(AvailabilityOptions.from_dict(cfg.section("availability")))

    @classmethod
    def from_env(cls) -> "AvailabilityContainer":
        """🌱 Будує контейнер з ENV-змінних `AVAILABILITY_*`."""
        return cls(AvailabilityOptions.from_env())

    def is_available(self, target_values: Sequence[str], encoded: str, catalog: OptionCatalog) -> bool:
        """⚖️ Строга перевірка через закодований рядок."""
        return self.encoded_matcher.is_available(target_values, encoded, catalog)

    def matcher_for(
        self,
        *,
        encoded: Optional[str] = None,
        variants: Optional[Sequence[ProductVariant]] = None,
    ) -> IAvailabilityMatcher:
        """🧭 Стратегія для товару: рядок → строга, інакше перебір варіантів."""
        return build_matcher(self.cache, encoded=encoded, variants=variants)

    def option_grid(
        self,
        catalog: OptionCatalog,
        selected_options: Sequence[SelectedOption],
        *,
        encoded: Optional[str] = None,
        variants: Optional[Sequence[ProductVariant]] = None,
    ) -> List[OptionAvailability]:
        """🎛️ Сітка значень для селектора варіантів."""
        matcher = self.matcher_for(encoded=encoded, variants=variants)
        return build_option_grid(catalog, selected_options, matcher)


__all__ = ["AvailabilityContainer"]
