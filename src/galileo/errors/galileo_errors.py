# 🚨 galileo/errors/galileo_errors.py
"""
🚨 Закрита таксономія помилок платформного адаптера.

🔹 `ErrorKind` — тег помилки, спільний для всіх платформних реалізацій.
🔹 `HttpStatusError` (IO) — відповідь отримано, але статус не 2xx.
🔹 `TransportError` (TRANSPORT) — збій до отримання статусу або під час читання тіла.
🔹 `DecodingError` (DECODING) — байти не вдалося декодувати в зображення.
🔹 Кожна помилка вміє віддати `to_log_extra()` для structured-логів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from enum import Enum                                                  # 🏷️ Теги помилок
from typing import Dict, Optional                                      # 📐 Типізація


# ================================
# 🏷️ ТЕГИ ПОМИЛОК
# ================================
class ErrorKind(str, Enum):
    """🏷️ Вид помилки, за яким викликач приймає рішення."""

    GENERIC = "generic"                                                # ❓ Нерозпізнаний збій
    IO = "io"                                                          # 🌐 Неуспішний HTTP-статус
    TRANSPORT = "transport"                                            # 🔌 DNS / зʼєднання / TLS / читання тіла
    DECODING = "decoding"                                              # 🖼️ Збій декодера
    CONFIGURATION = "configuration"                                    # ⚙️ Некоректне налаштування платформи


# ================================
# 🧠 БАЗОВА ПОМИЛКА
# ================================
class GalileoError(Exception):
    """🧠 Базова помилка адаптера. Підкласи фіксують власний `kind`."""

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message                                         # 🗒️ Короткий опис
        self.details = details                                         # 🔎 Технічні подробиці (текст винятку тощо)

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_kind": self.kind.value}
        if self.details:
            extra["details"] = self.details
        return extra

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


# ================================
# 🌐 МЕРЕЖЕВІ ПОМИЛКИ
# ================================
class HttpStatusError(GalileoError):
    """🌐 Відповідь отримано, але статус поза діапазоном [200, 300)."""

    kind = ErrorKind.IO

    def __init__(self, url: str, status_code: int, *, details: Optional[str] = None) -> None:
        super().__init__(f"Failed to load {url}: HTTP {status_code}", details=details)
        self.url = url                                                 # 🔗 URL запиту
        self.status_code = status_code                                 # 🔢 HTTP-код відповіді

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["url"] = self.url
        extra["status_code"] = self.status_code
        return extra


class TransportError(GalileoError):
    """🔌 Збій транспорту: запит не відправлено або тіло не дочитано."""

    kind = ErrorKind.TRANSPORT

    TIMEOUT = "timeout"
    CONNECT = "connect"
    READ = "read"
    PROTOCOL = "protocol"
    INVALID_URL = "invalid_url"
    OTHER = "other"

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        reason: str = OTHER,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.url = url                                                 # 🔗 URL (якщо відомий)
        self.reason = reason                                           # 🧭 Підтип збою транспорту

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["reason"] = self.reason
        if self.url:
            extra["url"] = self.url
        return extra


# ================================
# 🖼️ ПОМИЛКИ ДЕКОДУВАННЯ
# ================================
class DecodingError(GalileoError):
    """🖼️ Декодер не зміг перетворити байти на зображення."""

    kind = ErrorKind.DECODING


# ================================
# ⚙️ ПОМИЛКИ НАЛАШТУВАННЯ
# ================================
class PlatformConfigurationError(GalileoError):
    """⚙️ Платформу не вдалося сконструювати (фатально для екземпляра)."""

    kind = ErrorKind.CONFIGURATION


__all__ = [
    "ErrorKind",
    "GalileoError",
    "HttpStatusError",
    "TransportError",
    "DecodingError",
    "PlatformConfigurationError",
]
