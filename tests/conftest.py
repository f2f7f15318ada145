# tests/conftest.py
import sys
from io import BytesIO
from pathlib import Path
from typing import Callable, List, Optional

import httpx
import pytest
from PIL import Image

# Додаємо src в sys.path, щоб працював імпорт "galileo.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from galileo.config.platform_settings import PlatformSettings  # noqa: E402
from galileo.domain.platform.decoded_image import DecodedImage  # noqa: E402
from galileo.infrastructure.decoding.pillow_image_decoder import PillowImageDecoder  # noqa: E402
from galileo.infrastructure.platform.diagnostics import RecordingDiagnosticSink  # noqa: E402
from galileo.infrastructure.platform.native_platform_service import (  # noqa: E402
    NativePlatformService,
    build_http_client,
)


# ──────────────────────────────────────────────────────────────────────────────
#                          🔧 Тестові заглушки
# ──────────────────────────────────────────────────────────────────────────────

class SpyDecoder:
    """Пропускає виклики до справжнього декодера й запамʼятовує вхідні байти."""

    def __init__(self, inner=None):
        self._inner = inner or PillowImageDecoder()
        self.calls: List[bytes] = []

    def decode(self, data: bytes) -> DecodedImage:
        self.calls.append(data)
        return self._inner.decode(data)


def make_png(width: int = 3, height: int = 2, color=(255, 0, 0, 255), fmt: str = "PNG") -> bytes:
    mode = "RGBA" if fmt == "PNG" else "RGB"
    fill = color if mode == "RGBA" else color[:3]
    buffer = BytesIO()
    Image.new(mode, (width, height), fill).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def png_factory() -> Callable[..., bytes]:
    return make_png


@pytest.fixture
def spy_decoder() -> SpyDecoder:
    return SpyDecoder()


@pytest.fixture
def diagnostics() -> RecordingDiagnosticSink:
    return RecordingDiagnosticSink()


@pytest.fixture
def make_service(spy_decoder, diagnostics) -> Callable[..., NativePlatformService]:
    """Збирає NativePlatformService поверх httpx.MockTransport."""

    def _factory(handler, *, settings: Optional[PlatformSettings] = None, **overrides) -> NativePlatformService:
        client = build_http_client(settings or PlatformSettings(), transport=httpx.MockTransport(handler))
        kwargs = {"decoder": spy_decoder, "diagnostics": diagnostics}
        kwargs.update(overrides)
        return NativePlatformService(http_client=client, **kwargs)

    return _factory
