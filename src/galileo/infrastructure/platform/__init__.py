"""🖥️ Платформні реалізації `IPlatformService`."""

from __future__ import annotations

from .diagnostics import LoggingDiagnosticSink, RecordingDiagnosticSink
from .native_platform_service import NativePlatformService, build_http_client

__all__ = [
    "LoggingDiagnosticSink",
    "NativePlatformService",
    "RecordingDiagnosticSink",
    "build_http_client",
]
