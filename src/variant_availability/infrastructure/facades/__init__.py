# 📦 variant_availability/infrastructure/facades/__init__.py
"""📦 Тонкі функціональні обгортки над доменом і кешем."""

from .availability_facade import is_option_value_present

__all__ = ["is_option_value_present"]
