# 📜 galileo/shared/utils/logger.py
"""
📜 Єдина схема логування для платформного адаптера galileo.

🔹 Ініціалізує логер бібліотеки з консольним та (опційно) файловим виводом.
🔹 Підтримує JSON-формат, окремі рівні та suppress сторонніх бібліотек (httpx, PIL).
🔹 Надає хелпер для отримання дочірніх логерів через загальний префікс.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json                                                            # 📦 Серіалізація payload логів
import logging                                                         # 🪵 Робота з логерами Python
import sys                                                             # 🧵 Потоки stdout/stderr
import threading                                                       # 🧵 Захист ініціалізації
from dataclasses import dataclass, field                               # 🧱 DTO-конфіг логування
from logging.handlers import TimedRotatingFileHandler                  # 📁 Хендлер з ротацією файлів
from pathlib import Path                                               # 📂 Операції з файловими шляхами
from typing import Any, Dict, Optional, Union                          # 🧰 Типи для конфігів

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "galileo"                                              # 🏷️ Базовий префікс логерів
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"  # 📄 Формат для файлів
CONSOLE_FORMAT: str = "[%(levelname).1s] %(name)s: %(message)s"        # 🖥️ Консольний формат
DEFAULT_SUPPRESS: Dict[str, str] = {                                   # 🙊 Гучні сторонні бібліотеки
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "PIL": "WARNING",
}

_RESERVED_RECORD_KEYS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "thread",
        "threadName",
        "levelname",
        "funcName",
        "taskName",
    }
)

_lock = threading.Lock()                                               # 🔒 Блокуємо одночасну ініціалізацію


# ================================
# 🧾 DTO КОНФІГУРАЦІЇ
# ================================
@dataclass
class LoggingConfig:
    """Контейнер налаштувань логування з дефолтними значеннями."""
    level: str = "INFO"                                                # 🎚️ Глобальний рівень логів
    console: bool = True                                               # 🖥️ Чи вмикати консольний вивід
    json: bool = False                                                 # 📦 Чи вмикати JSON-формат для файлу
    file: Optional[str] = None                                         # 📁 Шлях до лог-файлу (None — без файлу)
    when: str = "midnight"                                             # ⏰ Періодичність ротації
    interval: int = 1                                                  # ⏱️ Інтервал ротації
    backup_count: int = 7                                              # ♻️ Скільки копій зберігати
    encoding: str = "utf-8"                                            # 🔤 Кодування файлу
    suppress: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SUPPRESS))  # 🙊 Треті сторони та їх рівні
    console_level: str = "INFO"                                        # 🖥️ Рівень для консолі
    file_level: str = "DEBUG"                                          # 📁 Рівень для файлу
    console_format: str = CONSOLE_FORMAT                               # 🖥️ Шаблон для консолі
    file_format: str = PLAIN_FORMAT                                    # 📄 Шаблон для файлу


# ================================
# 🧰 ФОРМАТТЕРИ
# ================================
class JsonFormatter(logging.Formatter):
    """Форматує записи логів у плоский JSON-представник."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),  # ⏱️ Час події
            "level": record.levelname,                                 # 🎚️ Рівень логування
            "name": record.name,                                       # 🏷️ Імʼя логера
            "module": record.module,                                   # 🧩 Модуль джерела
            "func": record.funcName,                                   # 🧮 Функція джерела
            "line": record.lineno,                                     # 📍 Номер рядка
            "message": record.getMessage(),                            # 🗒️ Повідомлення
        }
        for key, value in record.__dict__.items():                     # 🔎 Додаємо custom extra-поля
            if key.startswith("_") or key in _RESERVED_RECORD_KEYS or key in payload:
                continue
            try:
                json.dumps(value)                                      # ✅ Перевіряємо серіалізованість
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)                              # 🔄 Повертаємось до рядка
        if record.exc_info:                                            # ⚠️ Додаємо інформацію про виняток
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)                 # 🌐 Зберігаємо юнікод


# ================================
# 🛠️ ДОПОМОЖНІ ФУНКЦІЇ
# ================================
def _make_console_handler(fmt: logging.Formatter) -> logging.Handler:
    """Створює консольний хендлер із заданим форматером."""
    handler = logging.StreamHandler(sys.stdout)                        # 🖥️ Потік stdout
    handler.setFormatter(fmt)
    return handler


def _make_file_handler(cfg: LoggingConfig, fmt: logging.Formatter) -> logging.Handler:
    """Готує файловий хендлер із ротацією за часом."""
    log_path = Path(str(cfg.file))
    log_path.parent.mkdir(parents=True, exist_ok=True)                 # 🧱 Гарантуємо існування директорії
    handler = TimedRotatingFileHandler(
        filename=str(log_path),
        when=cfg.when,
        interval=cfg.interval,
        backupCount=cfg.backup_count,
        encoding=cfg.encoding,
    )
    handler.setFormatter(fmt)
    return handler


def _suppress_third_party(suppress: Dict[str, str]) -> None:
    """Знижує рівні логування для сторонніх бібліотек."""
    for name, level in (suppress or {}).items():
        target_level = getattr(logging, str(level).upper(), logging.WARNING)  # 🎚️ Конвертуємо у рівень
        logging.getLogger(name).setLevel(target_level)


def _to_level(value: Union[str, int], default: int) -> int:
    """Перетворює рядок/інт у числовий рівень логування."""
    if isinstance(value, int):
        return value
    resolved = getattr(logging, str(value).upper(), default)
    return resolved if isinstance(resolved, int) else default


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(
    *,
    level: Optional[str] = None,
    console: Optional[bool] = None,
    json_mode: Optional[bool] = None,
    file: Optional[str] = None,
    when: Optional[str] = None,
    interval: Optional[int] = None,
    backup_count: Optional[int] = None,
    encoding: Optional[str] = None,
    suppress: Optional[Dict[str, str]] = None,
    console_level: Optional[Union[str, int]] = None,
    file_level: Optional[Union[str, int]] = None,
    console_format: Optional[str] = None,
    file_format: Optional[str] = None,
) -> logging.Logger:
    """Ініціалізує логер `galileo` за єдиною схемою та повертає його."""
    with _lock:                                                        # 🔒 Блокуємо повторну конфігурацію
        cfg = LoggingConfig(
            level=level or "INFO",
            console=True if console is None else bool(console),
            json=False if json_mode is None else bool(json_mode),
            file=file,
            when=when or "midnight",
            interval=int(interval or 1),
            backup_count=7 if backup_count is None else int(backup_count),
            encoding=encoding or "utf-8",
            suppress={**DEFAULT_SUPPRESS, **(suppress or {})},
            console_level=str(console_level or level or "INFO"),
            file_level=str(file_level or level or "INFO"),
            console_format=console_format or CONSOLE_FORMAT,
            file_format=file_format or PLAIN_FORMAT,
        )

        root_logger = logging.getLogger(LOG_NAME)                      # 🏷️ Кореневий логер бібліотеки

        levels = [_to_level(cfg.level, logging.INFO), _to_level(cfg.console_level, logging.INFO)]
        if cfg.file:
            levels.append(_to_level(cfg.file_level, logging.INFO))
        root_logger.setLevel(min(levels))                              # 🧮 Нижня межа серед хендлерів

        for handler in list(root_logger.handlers):                     # 🧹 Очищаємо попередні хендлери
            if isinstance(handler, (logging.StreamHandler, TimedRotatingFileHandler)):
                root_logger.removeHandler(handler)
                if isinstance(handler, TimedRotatingFileHandler):
                    handler.close()

        fmt_console = logging.Formatter(cfg.console_format)
        fmt_file = JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format)

        if cfg.console:
            console_handler = _make_console_handler(fmt_console)
            console_handler.setLevel(_to_level(cfg.console_level, logging.INFO))
            root_logger.addHandler(console_handler)

        if cfg.file:
            file_handler = _make_file_handler(cfg, fmt_file)
            file_handler.setLevel(_to_level(cfg.file_level, logging.DEBUG))
            root_logger.addHandler(file_handler)

        _suppress_third_party(cfg.suppress)

        root_logger.info(
            "✅ Logging initialized | level=%s console=%s/%s json=%s file=%s",
            cfg.level.upper(),
            "ON" if cfg.console else "OFF",
            cfg.console_level.upper(),
            "ON" if cfg.json else "OFF",
            cfg.file or "OFF",
        )
        return root_logger


def init_logging_from_config(config: Optional[Dict[str, Any]]) -> logging.Logger:
    """
    Ініціалізує логування на базі словника з конфігураційного сервісу.

    Args:
        config: Налаштування розділу `logging` із ConfigService.

    Returns:
        logging.Logger: Логер `galileo`, проініціалізований за наданими параметрами.
    """
    node = config or {}
    return init_logging(
        level=node.get("level"),
        console=node.get("console"),
        json_mode=node.get("json"),
        file=node.get("file"),
        when=node.get("when"),
        interval=node.get("interval"),
        backup_count=node.get("backup_count"),
        encoding=node.get("encoding"),
        suppress=node.get("suppress"),
        console_level=node.get("console_level"),
        file_level=node.get("file_level"),
        console_format=node.get("console_format"),
        file_format=node.get("file_format"),
    )


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """
    Повертає дочірній логер із префіксом `LOG_NAME`.

    Args:
        suffix: Опційний суфікс, що додається через крапку.
    """
    logger_name = LOG_NAME if not suffix else f"{LOG_NAME}.{suffix}"
    return logging.getLogger(logger_name)
