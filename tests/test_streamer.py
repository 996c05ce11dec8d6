import asyncio
from contextlib import asynccontextmanager

import aiohttp
import pytest

from jarfetch.download.streamer import (
    ArtifactStreamer,
    content_disposition,
    relay_headers,
)
from jarfetch.exceptions import UpstreamTransportError
from jarfetch.models import ResolvedArtifact

ARTIFACT = ResolvedArtifact(
    url="https://maven.example/forge-1.20.1-installer.jar",
    filename="forge-1.20.1-installer.jar",
)


class _DummyContent:
    def __init__(self, chunks, fail_after=None, error=None):
        self._chunks = chunks
        self._fail_after = fail_after
        self._error = error or aiohttp.ClientPayloadError("connection reset")

    async def iter_chunked(self, size: int):
        for index, chunk in enumerate(self._chunks):
            if self._fail_after is not None and index >= self._fail_after:
                raise self._error
            yield chunk


class _DummyResponse:
    def __init__(self, content):
        self.headers = {}
        self.content = content


class _FakeUpstream:
    def __init__(self, content, open_error=None):
        self._content = content
        self._open_error = open_error
        self.calls = []

    @asynccontextmanager
    async def stream(self, url):
        self.calls.append(url)
        if self._open_error is not None:
            raise self._open_error
        yield _DummyResponse(self._content)


def test_content_disposition():
    assert content_disposition("OptiFine_1.20.1.jar") == (
        'attachment; filename="OptiFine_1.20.1.jar"'
    )


def test_relay_headers_drops_hop_by_hop_and_recomputed_headers():
    headers = relay_headers(
        {
            "Content-Type": "application/java-archive",
            "Content-Length": "10",
            "Transfer-Encoding": "chunked",
            "Connection": "keep-alive",
            "Content-Disposition": "inline",
            "Last-Modified": "Mon, 12 Jun 2023 10:00:00 GMT",
        }
    )
    assert headers == {
        "Content-Type": "application/java-archive",
        "Last-Modified": "Mon, 12 Jun 2023 10:00:00 GMT",
    }


def test_save_writes_all_chunks(tmp_path):
    upstream = _FakeUpstream(_DummyContent([b"PK", b"\x03\x04", b"rest"]))
    path = asyncio.run(ArtifactStreamer(upstream).save(ARTIFACT, str(tmp_path / "out")))
    assert path == str(tmp_path / "out" / "forge-1.20.1-installer.jar")
    with open(path, "rb") as f:
        assert f.read() == b"PK\x03\x04rest"
    assert upstream.calls == [ARTIFACT.url]


def test_save_removes_partial_file_on_failure(tmp_path):
    upstream = _FakeUpstream(_DummyContent([b"PK", b"more"], fail_after=1))
    with pytest.raises(UpstreamTransportError):
        asyncio.run(ArtifactStreamer(upstream).save(ARTIFACT, str(tmp_path)))
    assert not (tmp_path / ARTIFACT.filename).exists()


def test_save_wraps_timeout_and_removes_partial_file(tmp_path):
    content = _DummyContent(
        [b"PK", b"more"], fail_after=1, error=asyncio.TimeoutError()
    )
    with pytest.raises(UpstreamTransportError):
        asyncio.run(
            ArtifactStreamer(_FakeUpstream(content)).save(ARTIFACT, str(tmp_path))
        )
    assert not (tmp_path / ARTIFACT.filename).exists()


def test_save_removes_partial_file_on_cancel(tmp_path):
    content = _DummyContent(
        [b"PK", b"more"], fail_after=1, error=asyncio.CancelledError()
    )
    with pytest.raises(asyncio.CancelledError):
        asyncio.run(
            ArtifactStreamer(_FakeUpstream(content)).save(ARTIFACT, str(tmp_path))
        )
    assert not (tmp_path / ARTIFACT.filename).exists()


def test_save_keeps_existing_file_when_request_fails(tmp_path):
    existing = tmp_path / ARTIFACT.filename
    existing.write_bytes(b"previous download")
    upstream = _FakeUpstream(
        _DummyContent([]), open_error=UpstreamTransportError("request failed")
    )
    with pytest.raises(UpstreamTransportError):
        asyncio.run(ArtifactStreamer(upstream).save(ARTIFACT, str(tmp_path)))
    assert existing.read_bytes() == b"previous download"
