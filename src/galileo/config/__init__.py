# ⚙️ galileo/config/__init__.py
"""
⚙️ Пакет Config — конфігурація та збирання платформного сервісу.

- `ConfigService` обʼєднує config.yaml, користувацький файл і змінні середовища.
- `PlatformSettings` — типобезпечний розділ `platform`.
- `setup.container` обирає реалізацію платформи на етапі композиції
  (імпортується напряму, щоб уникнути циклу з інфраструктурою).
"""

from .config_service import ConfigService
from .platform_settings import DEFAULT_USER_AGENT, PlatformSettings

__all__ = [
    "ConfigService",
    "DEFAULT_USER_AGENT",
    "PlatformSettings",
]
