# 📜 variant_availability/shared/utils/logger.py
"""
📜 Логування ядра перевірки наявності варіантів.

🔹 Під час імпорту на кореневий логер пакета вішається лише `NullHandler`.
🔹 `init_logging` — явне підключення консолі та опційного файлу з ротацією (plain або JSON).
🔹 `get_logger` — дочірні логери з префіксом `LOG_NAME`.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json											# 📦 JSON-представлення записів
import logging											# 🪵 Стандартні логери
import sys											# 🖥️ stdout для консолі
import threading										# 🔒 Серіалізуємо ініціалізацію
from dataclasses import dataclass, field, replace						# 🧱 DTO налаштувань
from logging.handlers import TimedRotatingFileHandler					# ♻️ Ротація файлу
from pathlib import Path										# 📂 Шлях до лог-файлу
from typing import Any, Dict, List, Mapping, Optional, Union				# 🧰 Типи

# ================================
# 🧾 КОНСТАНТИ
# ================================
LOG_NAME: str = "variant_availability"							# 🏷️ Корінь дерева логерів пакета
CONSOLE_FORMAT: str = "[%(levelname).1s] %(name)s: %(message)s"				# 🖥️ Короткий рядок для консолі
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s:%(lineno)d - %(message)s"	# 📄 Рядок для файлу

# 🚫 Атрибути, які має будь-який LogRecord; решта — це extra
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}

_init_lock = threading.Lock()

logging.getLogger(LOG_NAME).addHandler(logging.NullHandler())


# ================================
# 🧱 НАЛАШТУВАННЯ
# ================================
@dataclass
class LoggingConfig:
    """Параметри `init_logging`; відповідає секції `logging` у config.yaml."""
    level: str = "INFO"
    console: bool = True
    json: bool = False									# 📦 JSON лише для файлу
    file: Optional[str] = None								# 📁 None → без файлу
    when: str = "midnight"
    interval: int = 1
    backup_count: int = 7
    encoding: str = "utf-8"
    suppress: Dict[str, str] = field(default_factory=dict)				# 🙊 Сторонні логери → рівень
    console_level: Optional[str] = None						# 🖥️ None → як `level`
    file_level: Optional[str] = None							# 📁 None → як `level`
    console_format: str = CONSOLE_FORMAT
    file_format: str = PLAIN_FORMAT

    @classmethod
    def from_mapping(cls, node: Optional[Mapping[str, Any]]) -> "LoggingConfig":
        """Будує конфіг зі словника, пропускаючи порожні та невідомі ключі."""
        known = cls.__dataclass_fields__
        kwargs = {key: value for key, value in (node or {}).items() if key in known and value is not None}
        return cls(**kwargs)


# ================================
# 🧰 ФОРМАТЕР
# ================================
class JsonFormatter(logging.Formatter):
    """Один запис → один JSON-обʼєкт; extra-поля додаються на верхній рівень."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key in _STANDARD_ATTRS or key.startswith("_") or key in payload:
                continue
            payload[key] = value if _is_json_safe(value) else str(value)	# 🔄 Несеріалізоване → str
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _is_json_safe(value: Any) -> bool:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return False
    return True


# ================================
# 🛠️ ХЕЛПЕРИ
# ================================
def to_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    """Рядок (`"debug"`) або число → числовий рівень; невідоме → `default`."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    resolved = logging.getLevelName(str(value).upper())
    return resolved if isinstance(resolved, int) else default


def _build_handlers(cfg: LoggingConfig) -> List[logging.Handler]:
    """Створює хендлери згідно з конфігом (консоль та/або файл)."""
    handlers: List[logging.Handler] = []
    if cfg.console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter(cfg.console_format))
        console.setLevel(to_level(cfg.console_level or cfg.level))
        handlers.append(console)
    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)			# 📂 Каталог логів може ще не існувати
        rotating = TimedRotatingFileHandler(
            filename=str(path),
            when=cfg.when,
            interval=cfg.interval,
            backupCount=cfg.backup_count,
            encoding=cfg.encoding,
        )
        rotating.setFormatter(JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format))
        rotating.setLevel(to_level(cfg.file_level or cfg.level))
        handlers.append(rotating)
    return handlers


def _detach_stream_handlers(target: logging.Logger) -> None:
    """Прибирає хендлери попередньої ініціалізації (NullHandler лишається)."""
    for handler in list(target.handlers):
        if isinstance(handler, logging.StreamHandler):			# 🧹 FileHandler теж StreamHandler
            target.removeHandler(handler)
            handler.close()


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(
    *,
    level: Optional[str] = None,
    console: Optional[bool] = None,
    json_mode: Optional[bool] = None,
    file: Optional[str] = None,
    suppress: Optional[Dict[str, str]] = None,
    console_level: Optional[Union[str, int]] = None,
    file_level: Optional[Union[str, int]] = None,
    console_format: Optional[str] = None,
    file_format: Optional[str] = None,
) -> logging.Logger:
    """
    Підключає вивід для логерів пакета. Повторний виклик замінює хендлери, а не дублює їх.

    Returns:
        logging.Logger: Кореневий логер `LOG_NAME`.
    """
    cfg = LoggingConfig()
    overrides: Dict[str, Any] = {
        "level": level,
        "console": console,
        "json": json_mode,
        "file": file,
        "suppress": suppress,
        "console_level": None if console_level is None else str(console_level),
        "file_level": None if file_level is None else str(file_level),
        "console_format": console_format,
        "file_format": file_format,
    }
    cfg = replace(cfg, **{key: value for key, value in overrides.items() if value is not None})
    return _apply(cfg)


def _apply(cfg: LoggingConfig) -> logging.Logger:
    root = logging.getLogger(LOG_NAME)
    with _init_lock:
        _detach_stream_handlers(root)
        handlers = _build_handlers(cfg)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(min([to_level(cfg.level)] + [h.level for h in handlers]))	# 🎚️ Найнижчий із задіяних
        for name, lvl in cfg.suppress.items():
            logging.getLogger(name).setLevel(to_level(lvl, logging.WARNING))

    root.info(
        "✅ logging ready | level=%s console=%s file=%s json=%s",
        cfg.level.upper(),
        cfg.console,
        cfg.file or "-",
        cfg.json,
    )
    return root


def init_logging_from_config(config: Optional[Mapping[str, Any]]) -> logging.Logger:
    """Те саме, що `init_logging`, але з секції `logging` від `ConfigService`."""
    return _apply(LoggingConfig.from_mapping(config))


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """`get_logger("decoder")` → логер `variant_availability.decoder`."""
    return logging.getLogger(f"{LOG_NAME}.{suffix}" if suffix else LOG_NAME)


__all__ = [
    "LOG_NAME",
    "LoggingConfig",
    "JsonFormatter",
    "init_logging",
    "init_logging_from_config",
    "get_logger",
    "to_level",
]
