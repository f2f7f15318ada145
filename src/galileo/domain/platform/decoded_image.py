# 🖼️ galileo/domain/platform/decoded_image.py
"""
🖼️ DecodedImage — готове до рендерингу зображення у форматі RGBA8.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass                                      # 🧱 Імутабельний DTO
from typing import Tuple                                               # 🧰 Типи

BYTES_PER_PIXEL = 4                                                    # 🎨 R, G, B, A


@dataclass(frozen=True, slots=True)
class DecodedImage:
    """📦 Піксельний буфер RGBA8 (row-major) із розмірами."""

    pixels: bytes                                                      # 💾 width * height * 4 байтів
    width: int                                                         # 📐 Ширина в пікселях
    height: int                                                        # 📐 Висота в пікселях

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Image dimensions must be non-negative, got {self.width}x{self.height}")
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.pixels) != expected:
            raise ValueError(
                f"RGBA buffer of {len(self.pixels)} bytes does not match {self.width}x{self.height} image"
            )

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def byte_size(self) -> int:
        return len(self.pixels)

    def __repr__(self) -> str:
        return f"DecodedImage({self.width}x{self.height}, {self.byte_size} bytes)"


__all__ = ["DecodedImage", "BYTES_PER_PIXEL"]
