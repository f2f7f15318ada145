# 📜 galileo/errors/strategies.py
"""
📜 Стратегії конвертації сторонніх винятків у таксономію `GalileoError`.

🔹 Виносять знання про httpx та Pillow з платформного сервісу й декодера.
🔹 Можна додавати нові стратегії, не змінюючи `ErrorConverter`.
🔹 Транспортні збої httpx ніколи не зливаються з `IO` (неуспішний статус).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                           # 🌐 HTTP-клієнт (винятки)
from PIL import Image, UnidentifiedImageError                          # 🖼️ Винятки Pillow

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування стратегій
from typing import Optional, Protocol                                  # 📐 Типи

# 🧩 Внутрішні модулі проєкту
from galileo.shared.utils.logger import LOG_NAME                       # 🏷️ Базовий префікс логерів
from .galileo_errors import DecodingError, GalileoError, TransportError  # ⚠️ Доменні помилки


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.strategies")


# ================================
# 🧠 КОНТРАКТ СТРАТЕГІЙ
# ================================
class IErrorConversionStrategy(Protocol):
    """🧠 Контракт, що визначає єдиний метод `handle`."""

    def handle(self, error: BaseException, *, url: Optional[str] = None) -> Optional[GalileoError]:
        """Вертає `GalileoError`, якщо виняток розпізнано, або None."""


def _request_url(error: BaseException, fallback: Optional[str]) -> Optional[str]:
    """🔗 URL запиту з винятку httpx; `error.request` кидає RuntimeError, якщо не заданий."""
    if fallback:
        return fallback
    try:
        request = getattr(error, "request", None)
    except RuntimeError:
        return None
    url = getattr(request, "url", None)
    return str(url) if url is not None else None


# ================================
# 🌐 HTTPX-СТРАТЕГІЯ
# ================================
class HttpxErrorStrategy(IErrorConversionStrategy):
    """🌐 Перетворює httpx-помилки на `TransportError` з підтипом у `reason`."""

    def handle(self, error: BaseException, *, url: Optional[str] = None) -> Optional[GalileoError]:
        if isinstance(error, httpx.InvalidURL):                        # 🔗 URL не розібрано
            logger.debug("🔗 httpx invalid url", extra={"url": url})
            return TransportError(
                f"Invalid URL: {url or error}",
                url=url,
                reason=TransportError.INVALID_URL,
                details=str(error),
            )

        if not isinstance(error, httpx.HTTPError):
            return None

        target = _request_url(error, url)
        if isinstance(error, httpx.TimeoutException):                  # ⏱️ Таймаути (connect/read/write/pool)
            reason = TransportError.TIMEOUT
        elif isinstance(error, httpx.ConnectError):                    # 🌐 Не вдалося підʼєднатися
            reason = TransportError.CONNECT
        elif isinstance(error, httpx.ReadError):                       # 📥 Обрив під час читання тіла
            reason = TransportError.READ
        elif isinstance(error, (httpx.ProtocolError, httpx.UnsupportedProtocol)):  # 📡 Порушення протоколу / схема
            reason = TransportError.PROTOCOL
        else:
            reason = TransportError.OTHER

        logger.debug("🔌 httpx transport error", extra={"url": target, "reason": reason})
        return TransportError(
            f"Transport failure ({reason}) for {target or 'N/A'}",
            url=target,
            reason=reason,
            details=str(error) or type(error).__name__,
        )


# ================================
# 🖼️ PILLOW-СТРАТЕГІЯ
# ================================
class PillowErrorStrategy(IErrorConversionStrategy):
    """🖼️ Конвертує винятки Pillow у `DecodingError`."""

    def handle(self, error: BaseException, *, url: Optional[str] = None) -> Optional[GalileoError]:
        if isinstance(error, Image.DecompressionBombError):            # 💣 Захист Pillow від гігантських зображень
            logger.debug("💣 Pillow decompression bomb")
            return DecodingError("Image exceeds the decompression size limit", details=str(error))
        if isinstance(error, UnidentifiedImageError):                  # ❓ Формат не розпізнано
            logger.debug("❓ Pillow could not identify image format")
            return DecodingError("Unrecognized image format", details=str(error))
        if isinstance(error, (OSError, EOFError)):                     # 🧩 Обрізані / пошкоджені дані
            logger.debug("🧩 Pillow failed to read image data")
            return DecodingError("Corrupted or truncated image data", details=str(error))
        if isinstance(error, (ValueError, SyntaxError)):               # 🧾 Некоректні заголовки
            logger.debug("🧾 Pillow rejected image header")
            return DecodingError("Malformed image data", details=str(error))
        return None


__all__ = [
    "IErrorConversionStrategy",
    "HttpxErrorStrategy",
    "PillowErrorStrategy",
]
