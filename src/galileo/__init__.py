# 🛰️ galileo/__init__.py
"""
🛰️ galileo — платформний адаптер для отримання зображень.

Рушій рендерингу залежить лише від `IPlatformService`; кожне середовище
надає власну реалізацію. Тут є native-реалізація на `httpx` + Pillow.
"""

from __future__ import annotations

from galileo.domain.platform import DecodedImage, IDiagnosticSink, IImageDecoder, IPlatformService
from galileo.errors import (
    DecodingError,
    ErrorKind,
    GalileoError,
    HttpStatusError,
    PlatformConfigurationError,
    TransportError,
)
from galileo.infrastructure.platform import NativePlatformService

__version__ = "0.1.0"

__all__ = [
    "DecodedImage",
    "DecodingError",
    "ErrorKind",
    "GalileoError",
    "HttpStatusError",
    "IDiagnosticSink",
    "IImageDecoder",
    "IPlatformService",
    "NativePlatformService",
    "PlatformConfigurationError",
    "TransportError",
]
