# 🖥️ galileo/infrastructure/platform/native_platform_service.py
"""
🖥️ Платформний сервіс для native-застосунків.

🔹 Тримає один довгоживучий `httpx.AsyncClient` з `User-Agent: galileo/0.1`.
🔹 Клієнт не змінюється після побудови та спільний для всіх викликів і клонів.
🔹 Неуспішний HTTP-статус → один запис діагностики + `HttpStatusError` (IO).
🔹 Транспортні збої → `TransportError` через `ErrorConverter`, без повторів.
🔹 Декодування повністю делеговане `IImageDecoder`, результат не змінюється.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                           # 🌐 Асинхронний HTTP-клієнт

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування кроків
from typing import Any, Dict, Optional                                 # 🧰 Типи

# 🧩 Внутрішні модулі проєкту
from galileo.config.platform_settings import PlatformSettings          # ⚙️ Налаштування клієнта
from galileo.domain.platform.decoded_image import DecodedImage         # 🖼️ Результат декодування
from galileo.domain.platform.interfaces import IDiagnosticSink, IImageDecoder  # 🔌 Колаборатори
from galileo.errors.error_converter import ErrorConverter              # 🛡️ Конвертація винятків
from galileo.errors.galileo_errors import GalileoError, HttpStatusError, PlatformConfigurationError  # ⚠️ Доменні помилки
from galileo.errors.strategies import HttpxErrorStrategy               # 🌐 Стратегія httpx
from galileo.infrastructure.decoding.pillow_image_decoder import PillowImageDecoder  # 🖼️ Декодер за замовчуванням
from galileo.shared.utils.logger import LOG_NAME                       # 🏷️ Базовий префікс логерів
from .diagnostics import LoggingDiagnosticSink                         # 🩺 Діагностика за замовчуванням

logger = logging.getLogger(f"{LOG_NAME}.platform.native")

_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)                # 🔌 Що конвертуємо в таксономію
_BODY_READ_ERRORS = (httpx.HTTPError, httpx.StreamError)               # 🕳️ Що толеруємо при читанні тіла помилки


def build_http_client(
    settings: PlatformSettings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """🌐 Створює спільний клієнт; таймаут None залишає дефолти httpx."""
    kwargs: Dict[str, Any] = {
        "headers": {"User-Agent": settings.user_agent},
        "follow_redirects": settings.follow_redirects,
    }
    if settings.timeout_s is not None:
        kwargs["timeout"] = httpx.Timeout(settings.timeout_s)
    if transport is not None:                                          # 🔌 Хост може підмінити транспорт (проксі, тести)
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)


# ================================
# 🖥️ NATIVE-ПЛАТФОРМА
# ================================
class NativePlatformService:
    """🖥️ Реалізація `IPlatformService` для процесу з прямим доступом до мережі."""

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        decoder: Optional[IImageDecoder] = None,
        diagnostics: Optional[IDiagnosticSink] = None,
        error_converter: Optional[ErrorConverter] = None,
    ) -> None:
        self._client = http_client                                     # 🌐 Спільний, лише для читання
        self._decoder: IImageDecoder = decoder or PillowImageDecoder()
        self._diagnostics: IDiagnosticSink = diagnostics or LoggingDiagnosticSink()
        self._errors = error_converter or ErrorConverter([HttpxErrorStrategy()])

    @classmethod
    def new(cls, settings: Optional[PlatformSettings] = None) -> "NativePlatformService":
        """
        Створює сервіс із власним HTTP-клієнтом.

        Raises:
            PlatformConfigurationError: клієнт не вдалося побудувати.
        """
        settings = settings or PlatformSettings()
        try:
            client = build_http_client(settings)
        except (TypeError, ValueError, httpx.InvalidURL) as exc:
            logger.error("🔥 Failed to initialize http client: %s", exc)
            raise PlatformConfigurationError("Failed to initialize http client", details=str(exc)) from exc
        logger.debug("⚙️ NativePlatformService created (user_agent=%s)", settings.user_agent)
        return cls(http_client=client)

    # ================================
    # 🔄 ПУБЛІЧНИЙ API
    # ================================
    async def load_image_url(self, url: str) -> DecodedImage:
        image_source = await self._load_from_web(url)
        return self._decoder.decode(image_source)

    async def load_bytes_from_url(self, url: str) -> bytes:
        return await self._load_from_web(url)

    async def decode_image(self, image_data: bytes) -> DecodedImage:
        return self._decoder.decode(image_data)

    # ================================
    # 🧬 КЛОНУВАННЯ ТА ЖИТТЄВИЙ ЦИКЛ
    # ================================
    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._client

    def clone(self) -> "NativePlatformService":
        """Новий екземпляр, що ділить той самий клієнт (без нового пулу зʼєднань)."""
        return type(self)(
            http_client=self._client,
            decoder=self._decoder,
            diagnostics=self._diagnostics,
            error_converter=self._errors,
        )

    def __copy__(self) -> "NativePlatformService":
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "NativePlatformService":
        return self.clone()

    async def aclose(self) -> None:
        """Закриває спільний клієнт. Викликає лише власник; впливає на всі клони."""
        await self._client.aclose()

    async def __aenter__(self) -> "NativePlatformService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"NativePlatformService(client=0x{id(self._client):x})"

    # ================================
    # 📥 ЗАВАНТАЖЕННЯ
    # ================================
    async def _load_from_web(self, url: str) -> bytes:
        logger.debug("📥 GET %s", url)
        if self._client.is_closed:                                     # 🔒 Власник уже закрив спільний клієнт
            raise PlatformConfigurationError("http client is closed", details=url)
        try:
            request = self._client.build_request("GET", url)
            response = await self._client.send(request, stream=True)
        except _TRANSPORT_ERRORS as exc:
            raise self._convert(exc, url) from exc

        try:
            if not response.is_success:
                body = await self._read_text_best_effort(response)
                status = f"{response.status_code} {response.reason_phrase}".strip()
                self._diagnostics.http_failure(url, status, body)
                raise HttpStatusError(url, response.status_code)

            try:
                data = await response.aread()
            except _TRANSPORT_ERRORS as exc:
                raise self._convert(exc, url) from exc
        finally:
            await response.aclose()

        logger.debug("✅ %s -> %d bytes", url, len(data))
        return data

    def _convert(self, exc: BaseException, url: str) -> GalileoError:
        error = self._errors.convert(exc, url=url)
        logger.debug("🔌 request to %s failed: %s", url, error.message, extra=error.to_log_extra())
        return error

    @staticmethod
    async def _read_text_best_effort(response: httpx.Response) -> Optional[str]:
        try:
            await response.aread()
            return response.text
        except _BODY_READ_ERRORS as exc:
            logger.debug("🕳️ Could not read error body: %s", exc)
            return None


__all__ = ["NativePlatformService", "build_http_client"]
