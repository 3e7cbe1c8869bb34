# 🧱 variant_availability/shared/__init__.py
"""🧱 Спільний шар: логування та ієрархія помилок."""
