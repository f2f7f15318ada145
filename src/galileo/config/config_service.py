# ⚙️ galileo/config/config_service.py
"""
⚙️ config_service.py — Сервіс для доступу до статичної конфігурації адаптера.

🔹 Клас `ConfigService`:
- Завантажує дефолти з `config.yaml` поруч із модулем.
- Накладає користувацький файл (`GALILEO_CONFIG`, YAML або JSON).
- Накладає змінні середовища (і `.env`) з префіксом `GALILEO_`.
- Надає єдиний метод .get() з ключами через крапку.
- Працює як Singleton; `reset()` скидає його (для тестів та перезавантаження).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                                            # 📦 YAML-парсинг
from dotenv import load_dotenv                                         # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import json                                                            # 📄 Робота з JSON-файлами
import logging                                                         # 🧾 Логування
import os                                                              # 📁 Доступ до змінних середовища
from pathlib import Path                                               # 📁 Побудова шляху до файлів
from typing import Any, Dict, Optional                                 # 🧩 Типізація

logger = logging.getLogger("galileo.config")

DEFAULTS_PATH = Path(__file__).parent / "config.yaml"                  # 📘 Вбудовані дефолти
CONFIG_PATH_ENV = "GALILEO_CONFIG"                                     # 📍 Шлях до користувацького файлу
ENV_KEYS: Dict[str, str] = {                                           # 🔐 Змінна середовища → ключ конфігу
    "GALILEO_PLATFORM": "platform.variant",
    "GALILEO_USER_AGENT": "platform.user_agent",
    "GALILEO_HTTP_TIMEOUT_S": "platform.timeout_s",
    "GALILEO_FOLLOW_REDIRECTS": "platform.follow_redirects",
    "GALILEO_LOG_LEVEL": "logging.level",
    "GALILEO_LOG_FILE": "logging.file",
    "GALILEO_LOG_JSON": "logging.json",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх конфігураційних параметрів адаптера.
    Працює як Singleton — конфігурація зчитується лише один раз.
    """

    _instance: Optional["ConfigService"] = None
    _config: Dict[str, Any]

    def __new__(cls) -> "ConfigService":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs()
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Скидає Singleton — наступний виклик перечитає всі джерела."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет (останнє перемагає): config.yaml → GALILEO_CONFIG → змінні середовища.
        """
        # --- 1. Вбудовані дефолти ---
        self._deep_update(self._config, self._read_file(DEFAULTS_PATH))

        # --- 2. Користувацький файл ---
        load_dotenv()
        user_path = os.getenv(CONFIG_PATH_ENV)
        if user_path:
            self._deep_update(self._config, self._read_file(Path(user_path)))

        # --- 3. Змінні середовища ---
        env_vars = {key: os.getenv(env) for env, key in ENV_KEYS.items() if os.getenv(env) is not None}
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.debug("✅ Конфігурацію завантажено: %s", self._config)

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        """📄 Читає YAML або JSON; відсутній чи зламаний файл — попередження і порожній словник."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning("⚠️ Файл конфігурації не знайдено: %s", path)
            return {}
        except (OSError, UnicodeDecodeError) as e:                     # 📂 Директорія, немає прав, не UTF-8
            logger.warning("⚠️ Не вдалося прочитати %s: %s", path, e)
            return {}
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося розібрати %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("⚠️ %s не містить словника верхнього рівня", path)
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'platform.user_agent').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.
        """
        value: Any = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                logger.debug("❓ Ключ '%s' не знайдено, повертаємо значення за замовчуванням", key)
                return default
        return value

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'platform.user_agent' → {'platform': {'user_agent': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split('.')
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """
        🔁 Рекурсивно обʼєднує два словника (оновлення значень).
        Якщо значення — словник, обʼєднує його глибоко.
        """
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                self._deep_update(source[key], value)
            else:
                source[key] = value
