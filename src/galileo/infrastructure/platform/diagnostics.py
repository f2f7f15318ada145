# 🩺 galileo/infrastructure/platform/diagnostics.py
"""
🩺 Реалізації `IDiagnosticSink`.

🔹 `LoggingDiagnosticSink` — один INFO-рядок на неуспішну відповідь (за замовчуванням).
🔹 `RecordingDiagnosticSink` — складає записи в памʼять для тестів і хостів-вбудовувачів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування
from dataclasses import dataclass                                      # 🧱 DTO запису
from typing import List, Optional                                      # 🧰 Типи

# 🧩 Внутрішні модулі проєкту
from galileo.shared.utils.logger import LOG_NAME                       # 🏷️ Базовий префікс логерів

BODY_UNAVAILABLE = "<body unavailable>"                                # 🕳️ Тіло не вдалося прочитати


class LoggingDiagnosticSink:
    """🧾 Пише діагностику неуспішних запитів у логер `galileo.platform.native`."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(f"{LOG_NAME}.platform.native")

    def http_failure(self, url: str, status: str, body: Optional[str]) -> None:
        self._logger.info(
            "Failed to load %s: %s, %s",
            url,
            status,
            BODY_UNAVAILABLE if body is None else repr(body),
            extra={"url": url, "http_status": status, "body_available": body is not None},
        )


@dataclass(frozen=True)
class HttpFailureRecord:
    """📚 Один діагностичний запис."""

    url: str
    status: str
    body: Optional[str]


class RecordingDiagnosticSink:
    """📚 Накопичує записи; список лише доповнюється."""

    def __init__(self) -> None:
        self.records: List[HttpFailureRecord] = []

    def http_failure(self, url: str, status: str, body: Optional[str]) -> None:
        self.records.append(HttpFailureRecord(url=url, status=status, body=body))


__all__ = [
    "BODY_UNAVAILABLE",
    "HttpFailureRecord",
    "LoggingDiagnosticSink",
    "RecordingDiagnosticSink",
]
