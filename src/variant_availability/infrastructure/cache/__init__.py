# 💾 variant_availability/infrastructure/cache/__init__.py
"""💾 Кеш декодованих множин та його Prometheus-метрики."""

from .decode_cache import (
    DecodeCache,
    DecodedSet,
    Decoder,
    get_default_cache,
    reset_default_cache,
)

__all__ = [
    "DecodeCache",
    "DecodedSet",
    "Decoder",
    "get_default_cache",
    "reset_default_cache",
]
