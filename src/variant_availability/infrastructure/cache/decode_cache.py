# 💾 variant_availability/infrastructure/cache/decode_cache.py
"""
💾 Thread-safe кеш декодованих множин комбінацій.

🔹 Ключ — точний закодований рядок, значення — `frozenset` канонічних ключів ("0,1", ...).
🔹 `max_entries=None` → без виселення (поведінка за замовчуванням); число ≥ 1 → LRU.
🔹 RLock навколо check-then-insert: паралельний перший доступ до ключа декодує рівно один раз.
🔹 Декодер інʼєктується (зручно для підрахунку викликів у тестах).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи роботи кешу
import threading                                                    # 🔒 Потокобезпечний доступ
import time                                                         # ⏱️ Вимір тривалості декодування
from collections import OrderedDict                                 # 🔁 Реалізація LRU
from typing import Callable, Dict, FrozenSet, Optional, Union       # 📐 Типи API

# 🧩 Внутрішні модулі проєкту
from variant_availability.domain.availability.decoder import decode_to_set  # 🧮 Декодер за замовчуванням
from variant_availability.infrastructure.cache.metrics import (     # 📈 Prometheus-метрики
    DECODE_CACHE_EVICTIONS,
    DECODE_CACHE_HITS,
    DECODE_CACHE_MISSES,
    DECODE_LATENCY,
)
from variant_availability.shared.errors import ConfigurationError   # 🚨 Некоректний ліміт
from variant_availability.shared.utils.logger import LOG_NAME       # 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.cache.decode_cache")  # 🧾 Локальний логер кешу

DecodedSet = FrozenSet[str]
Decoder = Callable[[str], DecodedSet]


# ================================
# 🔒 ВНУТРІШНІЙ LRU-КОНТЕЙНЕР
# ================================
class _LRU:
    """Внутрішня реалізація LRU; `max_entries=None` вимикає виселення."""

    def __init__(self, max_entries: Optional[int]) -> None:
        self.max = max_entries                                     # 🔢 Максимальна кількість записів
        self._data: "OrderedDict[str, DecodedSet]" = OrderedDict()  # 🗂️ Сховище

    def get(self, key: str) -> Optional[DecodedSet]:
        """Повертає множину та позначає ключ як найсвіжіший."""
        item = self._data.get(key)                                 # 🔎 Пошук у кеші
        if item is None:                                           # 🚫 Немає запису
            return None
        self._data.move_to_end(key, last=True)                     # 🔁 Переносимо в кінець (найсвіжіше використання)
        return item

    def set(self, key: str, value: DecodedSet) -> int:
        """Зберігає множину; повертає кількість виселених записів."""
        self._data[key] = value                                    # 📝 Зберігаємо значення
        self._data.move_to_end(key, last=True)                     # 🔁 Позначаємо як найсвіжіший
        evicted = 0
        while self.max is not None and len(self._data) > self.max:  # 🔄 Прибираємо найстаріші записи
            victim, _ = self._data.popitem(last=False)             # 🚮 Виселяємо елемент з голови OrderedDict
            logger.debug("♻️ Evicted encoded string (len=%d, max_entries=%s)", len(victim), self.max)
            evicted += 1
        return evicted

    def pop(self, key: str) -> Optional[DecodedSet]:
        return self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data


# ================================
# 💾 ОСНОВНИЙ КЕШ
# ================================
class DecodeCache:
    """💾 Кеш `encoded → frozenset` з опційним LRU-лімітом."""

    def __init__(
        self,
        *,
        max_entries: Optional[int] = None,
        decoder: Decoder = decode_to_set,
        metrics_enabled: bool = True,
    ) -> None:
        if max_entries is not None and int(max_entries) < 1:
            raise ConfigurationError(f"max_entries must be >= 1 or None, got: {max_entries!r}")
        self._max_entries = int(max_entries) if max_entries is not None else None  # 📏 Опціональний ліміт
        self._lru = _LRU(self._max_entries)                        # ♻️ Сховище
        self._decoder = decoder                                    # 🧮 Функція декодування
        self._metrics_enabled = metrics_enabled                    # 📈 Чи оновлювати Prometheus
        self._lock = threading.RLock()                             # 🔒 Потокобезпечність
        self._hits = 0                                             # ✅ Локальні лічильники для stats()
        self._misses = 0
        self._evictions = 0
        logger.info("⚙️ DecodeCache init (max_entries=%s)", self._max_entries or "unbounded")

    @property
    def max_entries(self) -> Optional[int]:
        return self._max_entries

    def get_or_decode(self, encoded: str) -> DecodedSet:
        """🦥 Повертає збережену множину або декодує та зберігає її."""
        with self._lock:                                           # 🔐 Check-then-insert під одним замком
            cached = self._lru.get(encoded)
            if cached is not None:
                self._hits += 1
                if self._metrics_enabled:
                    DECODE_CACHE_HITS.inc()
                logger.debug("✅ cache hit (len=%d)", len(encoded))
                return cached

            self._misses += 1
            if self._metrics_enabled:
                DECODE_CACHE_MISSES.inc()

            started = time.perf_counter()
            fresh = frozenset(self._decoder(encoded))              # 🆕 Декодуємо (чиста функція)
            elapsed = time.perf_counter() - started
            if self._metrics_enabled:
                DECODE_LATENCY.observe(elapsed)

            evicted = self._lru.set(encoded, fresh)
            if evicted:
                self._evictions += evicted
                if self._metrics_enabled:
                    DECODE_CACHE_EVICTIONS.inc(evicted)
            logger.debug(
                "🆕 cache miss decoded (len=%d combinations=%d took=%.6fs)",
                len(encoded),
                len(fresh),
                elapsed,
            )
            return fresh

    def invalidate(self, encoded: str) -> None:
        """🧹 Видаляє окремий ключ із кешу."""
        with self._lock:
            removed = self._lru.pop(encoded)
            logger.debug("🧹 invalidate removed=%s", removed is not None)

    def clear(self) -> None:
        """🧼 Повністю очищає кеш (лічильники stats() теж скидаються)."""
        with self._lock:
            self._lru.clear()
            self._hits = self._misses = self._evictions = 0
            logger.info("🧼 DecodeCache cleared")

    def stats(self) -> Dict[str, Union[int, None]]:
        """📈 Прості метрики кешу."""
        with self._lock:
            stats: Dict[str, Union[int, None]] = {
                "items": len(self._lru),                           # 📦 Усього записів
                "hits": self._hits,                                # ✅ Кеш-хіти
                "misses": self._misses,                            # ❌ Промахи (= кількість декодувань)
                "evictions": self._evictions,                      # 🚪 Виселення через ліміт
                "max_entries": self._max_entries,                  # 📏 Ліміт (None — без обмеження)
            }
            logger.debug("📊 stats=%s", stats)
            return stats

    def __len__(self) -> int:
        with self._lock:
            return len(self._lru)

    def __contains__(self, encoded: object) -> bool:
        with self._lock:
            return encoded in self._lru


# ================================
# 🌐 ПРОЦЕСНИЙ КЕШ ЗА ЗАМОВЧУВАННЯМ
# ================================
_default_cache: Optional[DecodeCache] = None
_default_lock = threading.Lock()


def get_default_cache() -> DecodeCache:
    """Повертає процесний кеш без ліміту (створюється ліниво)."""
    global _default_cache
    with _default_lock:
        if _default_cache is None:
            _default_cache = DecodeCache()
        return _default_cache


def reset_default_cache(cache: Optional[DecodeCache] = None) -> None:
    """Замінює (або скидає) процесний кеш; корисно в тестах і при переналаштуванні."""
    global _default_cache
    with _default_lock:
        _default_cache = cache


__all__ = [
    "DecodeCache",
    "DecodedSet",
    "Decoder",
    "get_default_cache",
    "reset_default_cache",
]
