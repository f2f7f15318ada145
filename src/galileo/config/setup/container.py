# 📦 galileo/config/setup/container.py
"""
📦 Контейнер залежностей платформного адаптера.

🔹 Читає конфігурацію через `ConfigService` і будує `PlatformSettings`.
🔹 Обирає реалізацію `IPlatformService` за назвою варіанту (DI, а не наслідування).
🔹 Тримає один екземпляр сервісу, щоб HTTP-клієнт будувався лише раз.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Базові засоби логування
from typing import Any, Callable, Dict, Mapping, Optional, Tuple       # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from galileo.config.config_service import ConfigService                # ⚙️ Джерела конфігурації
from galileo.config.platform_settings import PlatformSettings, to_bool  # ⚙️ Розділ platform
from galileo.domain.platform.interfaces import IPlatformService        # 🔌 Контракт платформи
from galileo.errors.galileo_errors import PlatformConfigurationError   # ⚙️ Фатальна помилка налаштування
from galileo.infrastructure.platform.native_platform_service import NativePlatformService  # 🖥️ Native-реалізація
from galileo.shared.utils.logger import LOG_NAME, init_logging_from_config  # 🧾 Логування

logger = logging.getLogger(f"{LOG_NAME}.config.container")

PlatformFactory = Callable[[PlatformSettings], IPlatformService]       # 🏭 Фабрика варіанту платформи


def _build_native(settings: PlatformSettings) -> IPlatformService:
    return NativePlatformService.new(settings)


DEFAULT_FACTORIES: Mapping[str, PlatformFactory] = {
    "native": _build_native,
}


class PlatformContainer:
    """📦 Єдина точка збирання платформного сервісу."""

    def __init__(
        self,
        config: Optional[ConfigService] = None,
        *,
        factories: Optional[Mapping[str, PlatformFactory]] = None,
        configure_logging: bool = False,
    ) -> None:
        self.config = config or ConfigService()
        if configure_logging:
            init_logging_from_config(self._logging_section())
        self.settings = PlatformSettings.from_mapping(self.config.get("platform", {}))
        self._factories: Dict[str, PlatformFactory] = dict(DEFAULT_FACTORIES)
        self._factories.update(factories or {})
        self._platform_service: Optional[IPlatformService] = None
        logger.debug("📦 PlatformContainer init (variant=%s, known=%s)", self.settings.variant, self.variants)

    @property
    def variants(self) -> Tuple[str, ...]:
        return tuple(sorted(self._factories))

    def register(self, name: str, factory: PlatformFactory) -> None:
        """Додає варіант платформи (наприклад, хост-специфічний) до реєстру."""
        self._factories[name.strip().lower()] = factory

    def build_platform_service(self) -> IPlatformService:
        """
        Будує новий сервіс для налаштованого варіанту.

        Raises:
            PlatformConfigurationError: варіант невідомий або його не вдалося зібрати.
        """
        factory = self._factories.get(self.settings.variant)
        if factory is None:
            logger.error("🚫 Unknown platform variant %r (known: %s)", self.settings.variant, self.variants)
            raise PlatformConfigurationError(
                f"Unknown platform variant: {self.settings.variant}",
                details=f"known variants: {', '.join(self.variants)}",
            )
        service = factory(self.settings)
        logger.info("🧩 Platform service built: %s", type(service).__name__)
        return service

    @property
    def platform_service(self) -> IPlatformService:
        """Лінивий спільний екземпляр; будується один раз на контейнер."""
        if self._platform_service is None:
            self._platform_service = self.build_platform_service()
        return self._platform_service

    def _logging_section(self) -> Dict[str, Any]:
        node = dict(self.config.get("logging", {}) or {})
        for key in ("console", "json"):
            if key in node and node[key] is not None:
                try:
                    node[key] = to_bool(node[key])
                except ValueError as exc:
                    raise PlatformConfigurationError(f"Invalid logging.{key}", details=str(exc)) from exc
        return node


__all__ = ["PlatformContainer", "PlatformFactory", "DEFAULT_FACTORIES"]
