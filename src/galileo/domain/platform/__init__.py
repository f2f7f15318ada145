"""
🏛️ Доменні контракти платформного адаптера.
"""

from __future__ import annotations

from .decoded_image import DecodedImage
from .interfaces import IDiagnosticSink, IImageDecoder, IPlatformService

__all__ = [
    "DecodedImage",
    "IDiagnosticSink",
    "IImageDecoder",
    "IPlatformService",
]
