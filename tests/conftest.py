# tests/conftest.py
import os
import sys
from pathlib import Path

import pytest

# 1) Гасим автоподхват сторонних плагинов
os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")

# 2) Добавляем src в sys.path, чтобы работал импорт "variant_availability.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from variant_availability.domain.options import ProductOption  # noqa: E402
from variant_availability.infrastructure.cache import reset_default_cache  # noqa: E402


@pytest.fixture
def catalog():
    """Color × Size, 2 × 3."""
    return (
        ProductOption("Color", ("Red", "Blue")),
        ProductOption("Size", ("S", "M", "L")),
    )


@pytest.fixture
def catalog_2x2():
    return (
        ProductOption("Color", ("Red", "Blue")),
        ProductOption("Size", ("S", "M")),
    )


class CountingDecoder:
    """Тестовий дубль декодера: рахує виклики та делегує справжньому."""

    def __init__(self):
        from variant_availability.domain.availability.decoder import decode_to_set

        self._decode = decode_to_set
        self.calls = []

    def __call__(self, encoded):
        self.calls.append(encoded)
        return self._decode(encoded)


@pytest.fixture
def counting_decoder():
    return CountingDecoder()


@pytest.fixture(autouse=True)
def _isolated_default_cache():
    reset_default_cache()
    yield
    reset_default_cache()
