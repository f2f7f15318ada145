"""
🚨 Помилки платформного адаптера та їх конвертація.
"""

from __future__ import annotations

from .error_converter import ErrorConverter
from .galileo_errors import (
    DecodingError,
    ErrorKind,
    GalileoError,
    HttpStatusError,
    PlatformConfigurationError,
    TransportError,
)
from .strategies import HttpxErrorStrategy, IErrorConversionStrategy, PillowErrorStrategy

__all__ = [
    "ErrorConverter",
    "ErrorKind",
    "GalileoError",
    "HttpStatusError",
    "TransportError",
    "DecodingError",
    "PlatformConfigurationError",
    "IErrorConversionStrategy",
    "HttpxErrorStrategy",
    "PillowErrorStrategy",
]
