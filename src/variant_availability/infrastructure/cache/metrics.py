# 📈 variant_availability/infrastructure/cache/metrics.py
"""
📈 Prometheus-метрики кешу декодованих комбінацій.

🔹 `DECODE_CACHE_HITS` / `DECODE_CACHE_MISSES` — лічильники кеш-хітів/промахів.
🔹 `DECODE_CACHE_EVICTIONS` — виселення через ліміт LRU.
🔹 `DECODE_LATENCY` — гістограма часу декодування одного рядка.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter, Histogram                      # 📊 Prometheus-метрики

# ================================
# 📊 ЛІЧИЛЬНИКИ КЕША
# ================================
DECODE_CACHE_HITS = Counter(
    "variant_decode_cache_hits_total",                               # 🏷️ Імʼя метрики
    "Decode cache hits for encoded option availability",             # 📝 Опис у Prometheus
)

DECODE_CACHE_MISSES = Counter(
    "variant_decode_cache_misses_total",                             # 🏷️ Імʼя метрики
    "Decode cache misses for encoded option availability",           # 📝 Опис
)

DECODE_CACHE_EVICTIONS = Counter(
    "variant_decode_cache_evictions_total",                          # 🏷️ Імʼя метрики
    "Entries evicted from the decode cache by the LRU bound",        # 📝 Опис
)

# ================================
# ⏱️ ГІСТОГРАМА ЛАТЕНТНОСТІ
# ================================
DECODE_LATENCY = Histogram(
    "variant_decode_seconds",                                        # 🏷️ Базова назва гістограми
    "Time to decode one encoded availability string",                # 📝 Опис
)


__all__ = [
    "DECODE_CACHE_HITS",
    "DECODE_CACHE_MISSES",
    "DECODE_CACHE_EVICTIONS",
    "DECODE_LATENCY",
]
