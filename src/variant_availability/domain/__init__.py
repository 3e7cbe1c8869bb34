# 🏛️ variant_availability/domain/__init__.py
"""🏛️ Чистий домен: без I/O, кешів та мережі."""
