"""
Command Contract.

Defines the interface every CLI command implements and the request and
response helpers they share. A command issues exactly one request
through the transport it is given, interprets the response and writes
human-readable output to the execution context.

Failures are raised, never printed:
    RequestConstructionError  request could not be built
    TransportError            request could not be delivered
    ServiceError              service answered with status >= 400
    ResponseReadError         body could not be read
    DecodeError               body did not match the expected shape
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TextIO, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from appctl.cli.client import Transport
from appctl.core.exceptions import (
    DecodeError,
    RequestConstructionError,
    ResponseReadError,
    ServiceError,
    TransportError,
)

T = TypeVar("T")


@dataclass(frozen=True)
class CommandInfo:
    """Static description of a command, read by the shell before running it."""

    name: str
    usage: str
    desc: str
    min_args: int = 0


@dataclass(frozen=True)
class ExecutionContext:
    """Arguments and output streams for a single command invocation."""

    args: tuple[str, ...]
    stdout: TextIO
    stderr: TextIO

    @classmethod
    def create(cls, args: list[str] | tuple[str, ...], stdout: TextIO, stderr: TextIO) -> "ExecutionContext":
        return cls(args=tuple(args), stdout=stdout, stderr=stderr)


class Command(ABC):
    """
    Base class for all commands.

    Subclasses describe themselves through info() and perform their single
    API call in run(). The shell guarantees len(context.args) >= min_args.
    """

    @abstractmethod
    def info(self) -> CommandInfo:
        """Describe the command. Must have no side effects."""

    @abstractmethod
    def run(self, context: ExecutionContext, client: Transport) -> None:
        """Execute the command, raising an ApplicationError on failure."""

    @property
    def name(self) -> str:
        return self.info().name


# =============================================================================
# Shared request/response helpers
# =============================================================================


def build_request(method: str, url: str, body: BaseModel | None = None) -> httpx.Request:
    """
    Build an outbound request, serializing ``body`` as JSON when given.

    Raises:
        RequestConstructionError: If the URL or body is unusable
    """
    headers: dict[str, str] = {}
    content: bytes | None = None
    try:
        if body is not None:
            content = body.model_dump_json().encode("utf-8")
            headers["Content-Type"] = "application/json"
        request = httpx.Request(method, url, content=content, headers=headers)
    except (httpx.InvalidURL, PydanticValidationError, TypeError, ValueError) as e:
        raise RequestConstructionError(f"Could not build {method} request for {url}: {e}") from e

    if request.url.scheme not in ("http", "https") or not request.url.host:
        raise RequestConstructionError(f"Could not build {method} request for {url}: not an HTTP URL")
    return request


def read_body(response: httpx.Response) -> bytes:
    """
    Read the full response body and release the response.

    The response is closed on every exit path.

    Raises:
        ResponseReadError: If the body stream fails
    """
    try:
        return response.read()
    except (httpx.HTTPError, httpx.StreamError) as e:
        raise ResponseReadError(f"Could not read response body: {e}") from e
    finally:
        response.close()


def perform(client: Transport, request: httpx.Request) -> httpx.Response:
    """
    Send ``request`` and return the successful response, body unread.

    Error statuses are turned into ServiceError with the body text as
    the message.

    Raises:
        TransportError: If the request could not be delivered
        ServiceError: If the service answered with status >= 400
        ResponseReadError: If an error body could not be read
    """
    try:
        response = client.send(request)
    except httpx.HTTPError as e:
        raise TransportError(f"{request.method} {request.url} failed: {e}") from e

    if response.is_error:
        body = read_body(response)
        message = body.decode("utf-8", errors="replace").strip() or response.reason_phrase
        raise ServiceError(message, status_code=response.status_code)
    return response


def is_no_content(response: httpx.Response) -> bool:
    """True for 204 responses, which are closed without reading."""
    if response.status_code == httpx.codes.NO_CONTENT:
        response.close()
        return True
    return False


def decode(adapter: TypeAdapter[T], body: bytes, what: str) -> T:
    """
    Decode a JSON body against ``adapter``.

    Raises:
        DecodeError: If the body is not valid JSON of the expected shape
    """
    try:
        return adapter.validate_json(body)
    except PydanticValidationError as e:
        raise DecodeError(f"Could not decode {what}: {_first_error(e)}") from e


def _first_error(error: PydanticValidationError) -> str:
    details: list[dict[str, Any]] = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first['msg']}" if location else first["msg"]
