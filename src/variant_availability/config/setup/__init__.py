# 🧰 variant_availability/config/setup/__init__.py
"""🧰 Збирання залежностей ядра."""

from .container import AvailabilityContainer

__all__ = ["AvailabilityContainer"]
