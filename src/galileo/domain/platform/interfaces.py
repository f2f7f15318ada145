# 🔌 galileo/domain/platform/interfaces.py
"""
🔌 Контракти платформного адаптера.

🔹 `IPlatformService` — спільний інтерфейс для всіх середовищ (native, браузер тощо).
🔹 `IImageDecoder` — колаборатор, що перетворює байти на `DecodedImage`.
🔹 `IDiagnosticSink` — явна точка діагностики замість глобального логера.

Успіх повертає значення, збій піднімає підклас `GalileoError`; ніколи обидва.
Виклики незалежні між собою, не мутують стан екземпляра, не повторюються і не кешуються.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Optional, Protocol, TypeVar, runtime_checkable      # 🧰 Типізація

# 🧩 Внутрішні модулі
from .decoded_image import DecodedImage                                # 🖼️ Результат декодування

TPlatformService = TypeVar("TPlatformService", bound="IPlatformService")


# ================================
# 🖼️ ДЕКОДЕР
# ================================
@runtime_checkable
class IImageDecoder(Protocol):
    """Перетворює байтовий буфер на зображення або піднімає `DecodingError`."""

    def decode(self, data: bytes) -> DecodedImage:
        ...


# ================================
# 🩺 ДІАГНОСТИКА
# ================================
@runtime_checkable
class IDiagnosticSink(Protocol):
    """Приймає один запис на кожну неуспішну HTTP-відповідь."""

    def http_failure(self, url: str, status: str, body: Optional[str]) -> None:
        """`body=None` означає, що тіло відповіді прочитати не вдалося."""
        ...


# ================================
# 🏛️ ІНТЕРФЕЙС ПЛАТФОРМИ
# ================================
@runtime_checkable
class IPlatformService(Protocol):
    """🔌 Контракт, який задовольняє кожна платформна реалізація."""

    @classmethod
    def new(cls: type[TPlatformService]) -> TPlatformService:
        """Створює екземпляр з усім налаштуванням середовища; збій — `PlatformConfigurationError`."""
        ...

    async def load_image_url(self, url: str) -> DecodedImage:
        """Завантажує байти з `url` і декодує їх (еквівалент `decode_image(load_bytes_from_url(url))`)."""
        ...

    async def load_bytes_from_url(self, url: str) -> bytes:
        """Лише завантажує байти; декодування не виконується."""
        ...

    async def decode_image(self, image_data: bytes) -> DecodedImage:
        """Декодує вже наявні байти без жодного I/O."""
        ...


__all__ = [
    "IPlatformService",
    "IImageDecoder",
    "IDiagnosticSink",
]
