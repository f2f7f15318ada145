"""🖼️ Реалізації декодера зображень."""

from __future__ import annotations

from .pillow_image_decoder import PillowImageDecoder

__all__ = ["PillowImageDecoder"]
