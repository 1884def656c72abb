"""Unit tests for the shared request/response helpers."""

import httpx
import pytest

from appctl.cli.command import build_request, decode, is_no_content, read_body
from appctl.cli.schemas import AppCreateRequest, ApplicationList
from appctl.core.exceptions import DecodeError, RequestConstructionError, ResponseReadError


class _ClosingStream(httpx.SyncByteStream):
    """Stream that records whether it was closed."""

    def __init__(self, chunks: list[bytes], fail: bool = False) -> None:
        self.chunks = chunks
        self.fail = fail
        self.closed = False

    def __iter__(self):
        yield from self.chunks
        if self.fail:
            raise httpx.ReadError("truncated")

    def close(self) -> None:
        self.closed = True


class TestBuildRequest:
    """Tests for build_request."""

    def test_without_body(self) -> None:
        request = build_request("DELETE", "http://apps.test/apps/blog")
        assert request.method == "DELETE"
        assert request.content == b""
        assert "Content-Type" not in request.headers

    def test_with_body(self) -> None:
        request = build_request("POST", "http://apps.test/apps", body=AppCreateRequest(name="blog", framework="go"))
        assert request.headers["Content-Type"] == "application/json"
        assert request.content == b'{"name":"blog","framework":"go"}'

    @pytest.mark.parametrize("url", ["ftp://apps.test/apps", "/apps"])
    def test_rejects_non_http_urls(self, url: str) -> None:
        with pytest.raises(RequestConstructionError):
            build_request("GET", url)


class TestReadBody:
    """Tests for read_body."""

    def test_reads_and_closes(self) -> None:
        """The stream is closed after a full read."""
        stream = _ClosingStream([b"[", b"]"])
        response = httpx.Response(200, stream=stream)

        assert read_body(response) == b"[]"
        assert stream.closed

    def test_closes_on_failure(self) -> None:
        """The stream is closed even when reading fails."""
        stream = _ClosingStream([b"[{"], fail=True)
        response = httpx.Response(200, stream=stream)

        with pytest.raises(ResponseReadError):
            read_body(response)

        assert stream.closed


class TestIsNoContent:
    """Tests for is_no_content."""

    def test_204_is_closed_unread(self) -> None:
        stream = _ClosingStream([])
        response = httpx.Response(204, stream=stream)

        assert is_no_content(response) is True
        assert stream.closed

    def test_200_is_left_open(self) -> None:
        stream = _ClosingStream([b"[]"])
        response = httpx.Response(200, stream=stream)

        assert is_no_content(response) is False
        assert not stream.closed


class TestDecode:
    """Tests for decode."""

    def test_decodes_expected_shape(self) -> None:
        apps = decode(ApplicationList, b'[{"name": "blog"}]', "app list")
        assert apps[0].name == "blog"

    def test_names_the_payload_on_failure(self) -> None:
        with pytest.raises(DecodeError, match="Could not decode app list"):
            decode(ApplicationList, b"{}", "app list")

    def test_empty_body_is_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            decode(ApplicationList, b"", "app list")
