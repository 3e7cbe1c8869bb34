# 🏗️ variant_availability/infrastructure/__init__.py
"""🏗️ Інфраструктура: кеш, метрики, фасади."""
