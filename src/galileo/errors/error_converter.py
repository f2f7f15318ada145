# 🛡️ galileo/errors/error_converter.py
"""
🛡️ Конвертер винятків у доменні `GalileoError`.

🔹 Проганяє виняток через передані стратегії та повертає першу успішну конвертацію.
🔹 Доменні помилки повертає як є, нерозпізнані загортає в `GalileoError(GENERIC)`.
🔹 `asyncio.CancelledError` ніколи не конвертується — скасування належить викликачу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio                                                         # ⏱️ CancelledError
import logging                                                         # 🧾 Логування кроків
from typing import Iterable, Optional, Tuple                           # 📐 Типи

# 🧩 Внутрішні модулі проєкту
from galileo.shared.utils.logger import LOG_NAME                       # 🏷️ Спільний неймспейс логів
from .galileo_errors import GalileoError                               # ⚠️ Доменні винятки
from .strategies import IErrorConversionStrategy                       # 🧠 Конвертери винятків


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.converter")


# ================================
# 🧠 КОНВЕРТЕР
# ================================
class ErrorConverter:
    """🧠 Приводить довільний виняток до таксономії адаптера."""

    def __init__(self, strategies: Iterable[IErrorConversionStrategy]) -> None:
        self._strategies: Tuple[IErrorConversionStrategy, ...] = tuple(strategies)  # 🧊 Незмінний набір
        logger.debug("🛡️ ErrorConverter init", extra={"strategies": len(self._strategies)})

    @property
    def strategies(self) -> Tuple[IErrorConversionStrategy, ...]:
        return self._strategies

    def convert(self, error: BaseException, *, url: Optional[str] = None) -> GalileoError:
        """
        Повертає доменну помилку для `error`.

        Raises:
            asyncio.CancelledError: якщо передано саме скасування.
        """
        if isinstance(error, asyncio.CancelledError):                  # ⏹️ Скасування не чіпаємо
            raise error

        if isinstance(error, GalileoError):                            # 🧾 Уже доменний виняток
            return error

        for strategy in self._strategies:
            try:
                converted = strategy.handle(error, url=url)
            except Exception as exc:                                   # noqa: BLE001
                logger.exception("🔥 Strategy failed: %r", strategy, exc_info=exc)
                continue
            if converted is not None:
                logger.debug("🔁 Converted %s via %r", type(error).__name__, strategy)
                return converted

        logger.debug("❓ No strategy matched %s", type(error).__name__)
        return GalileoError(str(error) or type(error).__name__, details=repr(error))


__all__ = ["ErrorConverter"]
