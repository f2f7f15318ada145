# 🖼️ galileo/infrastructure/decoding/pillow_image_decoder.py
"""
🖼️ Декодер зображень на базі Pillow.

🔹 Формат визначає Pillow за сигнатурою (PNG, JPEG, WebP, GIF, ...).
🔹 Примусово завантажує пікселі, щоб обрізані файли падали тут, а не в рендерері.
🔹 Конвертує результат у RGBA8 і повертає `DecodedImage`.
🔹 Будь-який збій Pillow перетворюється на `DecodingError` через `PillowErrorStrategy`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from PIL import Image                                                  # 🖼️ Декодування зображень

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування результатів
from io import BytesIO                                                 # 💾 Байти як файл
from typing import Optional                                            # 🧰 Типи

# 🧩 Внутрішні модулі проєкту
from galileo.domain.platform.decoded_image import DecodedImage         # 🖼️ Результат
from galileo.errors.error_converter import ErrorConverter              # 🛡️ Конвертація винятків
from galileo.errors.galileo_errors import DecodingError                # 🖼️ Помилка декодування
from galileo.errors.strategies import PillowErrorStrategy              # 🧠 Стратегія Pillow
from galileo.shared.utils.logger import LOG_NAME                       # 🏷️ Базовий префікс логерів

logger = logging.getLogger(f"{LOG_NAME}.decoding.pillow")

_WIDE_GRAY_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N")              # 🎚️ 16-бітні сірі (PNG відкривається як I або I;16)


def _to_rgba8(image: Image.Image) -> Image.Image:
    """Зводить зображення до RGBA8; 16-бітні значення масштабуються, а не обрізаються."""
    if image.mode == "RGBA":
        return image
    if image.mode in _WIDE_GRAY_MODES:
        wide = image if image.mode == "I" else image.convert("I")
        image = wide.point(lambda v: v * (1 / 256)).convert("L")     # 📉 0..65535 → 0..255
    return image.convert("RGBA")


class PillowImageDecoder:
    """🖼️ Реалізація `IImageDecoder` поверх Pillow."""

    def __init__(self, *, error_converter: Optional[ErrorConverter] = None) -> None:
        self._errors = error_converter or ErrorConverter([PillowErrorStrategy()])

    def decode(self, data: bytes) -> DecodedImage:
        """
        Декодує байти в RGBA8.

        Raises:
            DecodingError: формат не розпізнано, дані пошкоджені або зображення завелике.
        """
        try:
            with Image.open(BytesIO(data)) as image:
                image.load()                                           # 🧩 Тут спрацьовують обрізані файли
                source_format = image.format
                rgba = _to_rgba8(image)
                width, height = rgba.size
                pixels = rgba.tobytes()
        except Exception as exc:                                       # noqa: BLE001
            error = self._errors.convert(exc)
            if not isinstance(error, DecodingError):                   # ❓ Невідомий збій Pillow теж вважаємо декодуванням
                error = DecodingError("Failed to decode image", details=repr(exc))
            logger.debug("🚫 decode failed (%d bytes): %s", len(data), error.message, extra=error.to_log_extra())
            raise error from exc

        logger.debug("🖼️ decoded %s %dx%d (%d bytes in)", source_format or "?", width, height, len(data))
        return DecodedImage(pixels=pixels, width=width, height=height)


__all__ = ["PillowImageDecoder"]
