"""
🧪 test_native_platform_service.py — контракт NativePlatformService

Перевіряє:
- Успішне завантаження байтів і зображень (byte-for-byte, без трансформацій)
- Неуспішні HTTP-статуси → IO, один діагностичний запис, декодер не викликається
- Транспортні збої → TRANSPORT (а не IO)
- Незалежність конкурентних викликів і спільний клієнт у клонів
"""

import asyncio
import copy
import logging

import httpx
import pytest

from galileo.config.platform_settings import DEFAULT_USER_AGENT, PlatformSettings
from galileo.domain.platform.interfaces import IPlatformService
from galileo.errors.galileo_errors import (
    DecodingError,
    ErrorKind,
    HttpStatusError,
    PlatformConfigurationError,
    TransportError,
)
from galileo.infrastructure.platform.diagnostics import LoggingDiagnosticSink
from galileo.infrastructure.platform.native_platform_service import NativePlatformService


OK_URL = "https://host/ok.png"
MISSING_URL = "https://host/missing.png"


class _BrokenStream(httpx.AsyncByteStream):
    """Тіло відповіді, яке обривається під час читання."""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset by peer")
        yield b""  # pragma: no cover


# ──────────────────────────────────────────────────────────────────────────────
#                               🟢 Успішні запити
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_load_bytes_returns_body_exactly_and_sends_user_agent(make_service, png_bytes):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=png_bytes)

    service = make_service(handler)
    data = await service.load_bytes_from_url(OK_URL)

    assert data == png_bytes
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == OK_URL
    assert seen[0].headers["User-Agent"] == DEFAULT_USER_AGENT == "galileo/0.1"
    assert seen[0].content == b""


@pytest.mark.asyncio
async def test_load_bytes_does_not_decode(make_service, spy_decoder):
    service = make_service(lambda request: httpx.Response(200, content=b"not an image at all"))

    assert await service.load_bytes_from_url(OK_URL) == b"not an image at all"
    assert spy_decoder.calls == []


@pytest.mark.asyncio
async def test_load_image_url_matches_direct_decode(make_service, spy_decoder, png_factory):
    body = png_factory(width=5, height=4, color=(10, 20, 30, 255))
    service = make_service(lambda request: httpx.Response(200, content=body))

    via_url = await service.load_image_url(OK_URL)
    direct = await service.decode_image(body)

    assert via_url == direct
    assert via_url.dimensions == (5, 4)
    assert via_url.pixels[:4] == bytes((10, 20, 30, 255))
    assert spy_decoder.calls == [body, body]


@pytest.mark.asyncio
async def test_any_2xx_status_counts_as_success(make_service):
    service = make_service(lambda request: httpx.Response(204, content=b""))

    assert await service.load_bytes_from_url(OK_URL) == b""


# ──────────────────────────────────────────────────────────────────────────────
#                          🔴 Неуспішні HTTP-статуси
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_not_found_raises_io_and_records_diagnostic(make_service, spy_decoder, diagnostics):
    service = make_service(lambda request: httpx.Response(404, text="not found"))

    with pytest.raises(HttpStatusError) as excinfo:
        await service.load_image_url(MISSING_URL)

    assert excinfo.value.kind is ErrorKind.IO
    assert excinfo.value.status_code == 404
    assert excinfo.value.url == MISSING_URL
    assert spy_decoder.calls == []
    assert len(diagnostics.records) == 1
    record = diagnostics.records[0]
    assert record.url == MISSING_URL
    assert record.status == "404 Not Found"
    assert record.body == "not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [199, 301, 400, 403, 500, 503])
async def test_non_2xx_statuses_raise_io_for_bytes(make_service, diagnostics, status):
    service = make_service(lambda request: httpx.Response(status, text="nope"))

    with pytest.raises(HttpStatusError) as excinfo:
        await service.load_bytes_from_url(OK_URL)

    assert excinfo.value.kind is ErrorKind.IO
    assert [r.status.split()[0] for r in diagnostics.records] == [str(status)]


@pytest.mark.asyncio
async def test_unreadable_error_body_is_recorded_as_absent(make_service, diagnostics):
    service = make_service(lambda request: httpx.Response(500, stream=_BrokenStream()))

    with pytest.raises(HttpStatusError):
        await service.load_bytes_from_url(OK_URL)

    assert len(diagnostics.records) == 1
    assert diagnostics.records[0].body is None


@pytest.mark.asyncio
async def test_default_sink_logs_url_status_and_body(make_service, caplog):
    service = make_service(
        lambda request: httpx.Response(404, text="not found"),
        diagnostics=LoggingDiagnosticSink(),
    )

    with caplog.at_level(logging.INFO, logger="galileo"):
        with pytest.raises(HttpStatusError):
            await service.load_image_url(MISSING_URL)

    records = [r for r in caplog.records if r.name == "galileo.platform.native" and r.levelno == logging.INFO]
    assert len(records) == 1
    message = records[0].getMessage()
    assert MISSING_URL in message
    assert "404" in message
    assert "not found" in message


# ──────────────────────────────────────────────────────────────────────────────
#                            🔌 Транспортні збої
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_connection_refused_is_transport_not_io(make_service, spy_decoder, diagnostics):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    service = make_service(handler)

    with pytest.raises(TransportError) as excinfo:
        await service.load_image_url(OK_URL)

    error = excinfo.value
    assert error.kind is ErrorKind.TRANSPORT
    assert error.kind is not ErrorKind.IO
    assert error.reason == TransportError.CONNECT
    assert error.url == OK_URL
    assert isinstance(error.__cause__, httpx.ConnectError)
    assert spy_decoder.calls == []
    assert diagnostics.records == []


@pytest.mark.asyncio
async def test_timeout_is_transport_error(make_service):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    service = make_service(handler)

    with pytest.raises(TransportError) as excinfo:
        await service.load_bytes_from_url(OK_URL)

    assert excinfo.value.reason == TransportError.TIMEOUT


@pytest.mark.asyncio
async def test_body_read_failure_on_success_is_transport_error(make_service, spy_decoder, diagnostics):
    service = make_service(lambda request: httpx.Response(200, stream=_BrokenStream()))

    with pytest.raises(TransportError) as excinfo:
        await service.load_image_url(OK_URL)

    assert excinfo.value.reason == TransportError.READ
    assert spy_decoder.calls == []
    assert diagnostics.records == []


@pytest.mark.asyncio
async def test_failures_are_not_retried(make_service):
    attempts = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request)
        return httpx.Response(503, text="busy")

    service = make_service(handler)

    with pytest.raises(HttpStatusError):
        await service.load_bytes_from_url(OK_URL)

    assert len(attempts) == 1


# ──────────────────────────────────────────────────────────────────────────────
#                           🖼️ Делегування декодеру
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_decode_image_makes_no_network_call(make_service):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    service = make_service(handler)

    with pytest.raises(DecodingError) as excinfo:
        await service.decode_image(b"not an image")

    assert excinfo.value.kind is ErrorKind.DECODING
    assert calls == []


@pytest.mark.asyncio
async def test_decode_image_returns_decoder_result_unmodified(make_service):
    sentinel = object()
    failure = DecodingError("boom")

    class _Decoder:
        def __init__(self):
            self.fail = False

        def decode(self, data):
            if self.fail:
                raise failure
            return sentinel

    decoder = _Decoder()
    service = make_service(lambda request: httpx.Response(200), decoder=decoder)

    assert await service.decode_image(b"anything") is sentinel

    decoder.fail = True
    with pytest.raises(DecodingError) as excinfo:
        await service.decode_image(b"anything")
    assert excinfo.value is failure


# ──────────────────────────────────────────────────────────────────────────────
#                        🧵 Конкурентність та клонування
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_concurrent_loads_are_independent(make_service):
    bodies = {f"https://host/{i}.bin": f"payload-{i}".encode() for i in range(10)}

    async def handler(request: httpx.Request) -> httpx.Response:
        index = int(request.url.path.strip("/").split(".")[0])
        await asyncio.sleep(0.001 * (10 - index))  # пізніші URL завершуються першими
        return httpx.Response(200, content=bodies[str(request.url)])

    service = make_service(handler)

    results = await asyncio.gather(*(service.load_bytes_from_url(url) for url in bodies))

    assert results == list(bodies.values())


@pytest.mark.asyncio
async def test_two_concurrent_image_loads_complete_in_any_order(make_service, png_factory):
    small = png_factory(width=1, height=1)
    large = png_factory(width=8, height=6)

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/slow.png":
            await asyncio.sleep(0.01)
            return httpx.Response(200, content=small)
        return httpx.Response(200, content=large)

    service = make_service(handler)

    slow, fast = await asyncio.gather(
        service.load_image_url("https://host/slow.png"),
        service.load_image_url("https://host/fast.png"),
    )

    assert slow.dimensions == (1, 1)
    assert fast.dimensions == (8, 6)


@pytest.mark.asyncio
async def test_clone_shares_client(make_service):
    service = make_service(lambda request: httpx.Response(200, content=b"x"))

    clone = service.clone()
    shallow = copy.copy(service)
    deep = copy.deepcopy(service)

    assert clone is not service
    assert clone.http_client is service.http_client
    assert shallow.http_client is service.http_client
    assert deep.http_client is service.http_client
    assert await clone.load_bytes_from_url(OK_URL) == b"x"


# ──────────────────────────────────────────────────────────────────────────────
#                         ⚙️ Конструювання та життєвий цикл
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_new_builds_client_with_fixed_identity():
    service = NativePlatformService.new()
    try:
        assert isinstance(service, IPlatformService)
        assert service.http_client.headers["User-Agent"] == "galileo/0.1"
        assert service.http_client.is_closed is False
    finally:
        await service.aclose()


@pytest.mark.asyncio
async def test_new_applies_settings_timeout():
    service = NativePlatformService.new(PlatformSettings(timeout_s=2.5))
    try:
        assert service.http_client.timeout.read == 2.5
    finally:
        await service.aclose()


@pytest.mark.asyncio
async def test_async_context_closes_shared_client(make_service):
    service = make_service(lambda request: httpx.Response(200, content=b"x"))
    clone = service.clone()

    async with service as entered:
        assert entered is service

    assert service.http_client.is_closed
    assert clone.http_client.is_closed


@pytest.mark.asyncio
async def test_clone_after_close_raises_configuration_error(make_service, spy_decoder, diagnostics):
    calls = []
    service = make_service(lambda request: calls.append(request) or httpx.Response(200, content=b"x"))
    clone = service.clone()
    await service.aclose()

    with pytest.raises(PlatformConfigurationError) as excinfo:
        await clone.load_bytes_from_url(OK_URL)
    with pytest.raises(PlatformConfigurationError):
        await clone.load_image_url(OK_URL)

    assert excinfo.value.kind is ErrorKind.CONFIGURATION
    assert calls == []
    assert spy_decoder.calls == []
    assert diagnostics.records == []
