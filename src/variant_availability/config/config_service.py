# ⚙️ variant_availability/config/config_service.py
"""
⚙️ Статична конфігурація пакета: файли + змінні середовища.

🔹 `ConfigService` зчитує `config.json`, потім `config.yaml`, потім ENV (з підтягуванням `.env`).
🔹 Пізніше джерело перекриває раннє; словники зливаються рекурсивно.
🔹 Singleton: файли читаються один раз, `reset()` змушує перечитати.

Каталог з файлами: аргумент `config_dir`, ENV `VARIANT_AVAILABILITY_CONFIG_DIR`
або каталог цього модуля (там лежить дефолтний config.yaml).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                                  # 📘 config.yaml
from dotenv import load_dotenv                               # 🔐 .env → os.environ

# 🔠 Системні імпорти
import json                                                  # 📄 config.json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

# 🧩 Внутрішні модулі проєкту
from variant_availability.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config.config_service")

CONFIG_DIR_ENV = "VARIANT_AVAILABILITY_CONFIG_DIR"

# 🔐 Крапковий ключ конфігу → ENV-змінна, що його перекриває
_ENV_KEYS: Dict[str, str] = {
    "availability.cache_max_entries": "AVAILABILITY_CACHE_MAX_ENTRIES",
    "availability.log_level": "AVAILABILITY_LOG_LEVEL",
    "availability.metrics_enabled": "AVAILABILITY_METRICS_ENABLED",
    "logging.level": "AVAILABILITY_LOG_LEVEL",
    "logging.file": "AVAILABILITY_LOG_FILE",
}


def _merge_into(target: Dict[str, Any], incoming: Mapping[str, Any]) -> None:
    """Рекурсивне злиття: вкладені dict зливаються, решта перезаписується."""
    for key, value in incoming.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            _merge_into(current, value)
        else:
            target[key] = dict(value) if isinstance(value, Mapping) else value


def _nest(flat: Mapping[str, Any]) -> Dict[str, Any]:
    """`{"a.b": 1}` → `{"a": {"b": 1}}`."""
    nested: Dict[str, Any] = {}
    for dotted, value in flat.items():
        *parents, leaf = dotted.split(".")
        node = nested
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value
    return nested


class ConfigService:
    """
    ⚙️ Єдина точка доступу до налаштувань.

    Значення дістаються крапковим ключем: `ConfigService().get("availability.log_level")`.
    """

    _instance: Optional["ConfigService"] = None

    def __new__(cls, config_dir: Optional[Union[str, Path]] = None) -> "ConfigService":
        if cls._instance is not None:
            return cls._instance
        instance = super().__new__(cls)
        instance._config_dir = cls._resolve_dir(config_dir)
        instance._config = instance._collect()
        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Забуває екземпляр; наступний виклик перечитає джерела."""
        cls._instance = None

    @staticmethod
    def _resolve_dir(config_dir: Optional[Union[str, Path]]) -> Path:
        chosen = config_dir or os.getenv(CONFIG_DIR_ENV)
        return Path(chosen) if chosen else Path(__file__).parent

    # ================================
    # 📥 ЗАВАНТАЖЕННЯ
    # ================================
    def _read(self, filename: str, parse: Callable[[Any], Any], errors: tuple) -> Dict[str, Any]:
        """Читає один файл; відсутній або зіпсований файл → порожній dict."""
        path = self._config_dir / filename
        if not path.is_file():
            logger.debug("📭 %s not found in %s", filename, self._config_dir)
            return {}
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = parse(fh)
        except errors as exc:
            logger.warning("⚠️ Failed to parse %s: %s", path, exc)
            return {}
        if not isinstance(data, Mapping):
            logger.warning("⚠️ %s must contain a mapping at top level, got %s", path, type(data).__name__)
            return {}
        return dict(data)

    def _from_env(self) -> Dict[str, Any]:
        load_dotenv()                                        # 🔐 Не перезаписує вже задані ENV
        present = {key: os.environ[name] for key, name in _ENV_KEYS.items() if name in os.environ}
        return _nest(present)

    def _collect(self) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for layer in (
            self._read("config.json", json.load, (json.JSONDecodeError,)),
            self._read("config.yaml", yaml.safe_load, (yaml.YAMLError,)),
            self._from_env(),
        ):
            _merge_into(merged, layer)
        logger.info("✅ Config loaded from %s (sections: %s)", self._config_dir, ", ".join(sorted(merged)) or "-")
        return merged

    # ================================
    # 🔑 ДОСТУП
    # ================================
    def get(self, key: str, default: Any = None) -> Any:
        """
        Значення за крапковим ключем.

        Args:
            key: Наприклад `"availability.cache_max_entries"`.
            default: Що повернути, якщо будь-якої ланки шляху немає.
        """
        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def section(self, name: str) -> Dict[str, Any]:
        """Копія секції верхнього рівня (або порожній dict)."""
        node = self._config.get(name)
        return dict(node) if isinstance(node, dict) else {}


__all__ = ["ConfigService", "CONFIG_DIR_ENV"]
