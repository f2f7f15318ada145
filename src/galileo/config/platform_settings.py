# ⚙️ galileo/config/platform_settings.py
"""
⚙️ PlatformSettings — типобезпечні налаштування native-платформи.

🔹 Будується з розділу `platform` конфігурації (`ConfigService`).
🔹 Некоректні значення одразу дають `PlatformConfigurationError`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування розбору
from dataclasses import dataclass                                      # 🧱 Імутабельний DTO
from typing import Any, Mapping, Optional                              # 🧰 Типи

# 🧩 Внутрішні модулі проєкту
from galileo.errors.galileo_errors import PlatformConfigurationError   # ⚙️ Фатальна помилка налаштування
from galileo.shared.utils.logger import LOG_NAME                       # 🏷️ Базовий префікс логерів

logger = logging.getLogger(f"{LOG_NAME}.config.platform")

DEFAULT_USER_AGENT = "galileo/0.1"                                     # 🏷️ Ідентифікатор клієнта
DEFAULT_VARIANT = "native"                                             # 🧩 Реалізація за замовчуванням


@dataclass(frozen=True, slots=True)
class PlatformSettings:
    """⚙️ Параметри побудови HTTP-клієнта платформи."""

    variant: str = DEFAULT_VARIANT                                     # 🧩 Яку реалізацію збирати
    user_agent: str = DEFAULT_USER_AGENT                               # 🏷️ Заголовок User-Agent
    timeout_s: Optional[float] = None                                  # ⏳ None — дефолти httpx
    follow_redirects: bool = False                                     # ↪️ httpx за замовчуванням не слідує

    def __post_init__(self) -> None:
        if not str(self.user_agent).strip():
            raise PlatformConfigurationError("platform.user_agent must not be empty")
        if not str(self.variant).strip():
            raise PlatformConfigurationError("platform.variant must not be empty")
        if self.timeout_s is not None and (
            isinstance(self.timeout_s, bool) or not isinstance(self.timeout_s, (int, float))
        ):
            raise PlatformConfigurationError(
                f"platform.timeout_s must be a number, got {self.timeout_s!r}"
            )
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise PlatformConfigurationError(
                f"platform.timeout_s must be positive, got {self.timeout_s}"
            )

    @classmethod
    def from_mapping(cls, node: Optional[Mapping[str, Any]]) -> "PlatformSettings":
        """Будує налаштування з розділу `platform`; відсутні ключі беруть дефолти."""
        node = node or {}
        try:
            raw_timeout = node.get("timeout_s")
            timeout_s = None if raw_timeout in (None, "") else float(raw_timeout)
            settings = cls(
                variant=str(node.get("variant") or DEFAULT_VARIANT).strip().lower(),
                user_agent=str(node.get("user_agent") or DEFAULT_USER_AGENT),
                timeout_s=timeout_s,
                follow_redirects=to_bool(node.get("follow_redirects", False)),
            )
        except (TypeError, ValueError) as exc:
            logger.error("🚫 Invalid platform settings: %s", exc)
            raise PlatformConfigurationError("Invalid platform settings", details=str(exc)) from exc
        logger.debug("⚙️ PlatformSettings parsed: %s", settings)
        return settings


def to_bool(value: Any) -> bool:
    """Розбирає bool із YAML/ENV-рядка; невідоме значення — ValueError."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"", "0", "false", "no", "off"}:
            return False
        raise ValueError(f"not a boolean: {value!r}")
    return bool(value)


__all__ = ["PlatformSettings", "DEFAULT_USER_AGENT", "DEFAULT_VARIANT", "to_bool"]
