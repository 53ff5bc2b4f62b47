"""In-memory HTTP request and response objects used by the router."""

from __future__ import annotations

import io
from collections.abc import Iterable, Mapping
from typing import Any, BinaryIO
from urllib.parse import parse_qs, unquote, urlsplit
from wsgiref.headers import Headers

_DEFAULT_STATUS = 200
_NOT_WRITTEN = -1


def _to_stream(body: Any) -> BinaryIO:
    if body is None:
        return io.BytesIO()
    if isinstance(body, str):
        return io.BytesIO(body.encode("utf-8"))
    if isinstance(body, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(body))
    return body


def _to_headers(headers: Mapping[str, str] | Iterable[tuple[str, str]] | None) -> Headers:
    result = Headers([])
    if headers is None:
        return result
    pairs = headers.items() if isinstance(headers, Mapping) else headers
    for key, value in pairs:
        result.add_header(key, value)
    return result


class Request:
    """An incoming HTTP request: method, URL parts, headers, body and peer address."""

    def __init__(
        self,
        method: str = "GET",
        url: str = "/",
        body: Any = b"",
        headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        remote_addr: str = "",
        context: Any = None,
    ):
        parts = urlsplit(url)
        self.method = method
        self.scheme = parts.scheme
        self.host = parts.netloc
        self.path = unquote(parts.path)
        self.raw_path = parts.path if self.path != parts.path else ""
        self.raw_query = parts.query
        self.headers = _to_headers(headers)
        self.body = _to_stream(body)
        self.remote_addr = remote_addr
        self.context = context

    @property
    def url(self) -> str:
        """The request target rebuilt from its path and query."""
        prefix = f"{self.scheme}://{self.host}" if self.scheme and self.host else ""
        target = prefix + (self.raw_path or self.path)
        return f"{target}?{self.raw_query}" if self.raw_query else target

    def get_header(self, key: str) -> str:
        """Return the first value of header ``key``, or an empty string."""
        return self.headers.get(key) or ""

    def set_header(self, key: str, value: str) -> None:
        """Replace every value of header ``key`` with ``value``."""
        self.headers[key] = value

    def del_header(self, key: str) -> None:
        """Remove header ``key`` entirely."""
        del self.headers[key]

    def query_values(self) -> dict[str, list[str]]:
        """Parse the query string into a mapping of key to all its values."""
        return parse_qs(self.raw_query, keep_blank_values=True)

    def cookie(self, name: str) -> str:
        """Return the raw value of cookie ``name``; raise KeyError if absent."""
        for header in self.headers.get_all("Cookie"):
            for part in header.split(";"):
                key, sep, value = part.strip().partition("=")
                if sep and key == name:
                    if len(value) > 1 and value[0] == value[-1] == '"':
                        value = value[1:-1]
                    return value
        raise KeyError(f"named cookie not present: {name}")


class Response:
    """A buffered HTTP response: status, headers and body bytes."""

    def __init__(self):
        self.status = _DEFAULT_STATUS
        self.headers = Headers([])
        self.client_gone = False
        self._body = bytearray()
        self._size = _NOT_WRITTEN

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    @property
    def size(self) -> int:
        return self._size

    def write_header(self, code: int) -> None:
        """Set the status code unless the headers have already been sent."""
        if code > 0 and code != self.status and not self.written():
            self.status = code

    def write_header_now(self) -> None:
        """Commit the status and headers if that has not happened yet."""
        if not self.written():
            self._size = 0

    def write(self, data: bytes | str) -> int:
        """Append ``data`` to the body, committing headers first."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.write_header_now()
        self._body.extend(data)
        self._size += len(data)
        return len(data)

    def written(self) -> bool:
        """Return True once the status and headers have been committed."""
        return self._size != _NOT_WRITTEN

    def text(self) -> str:
        """Return the body decoded as UTF-8."""
        return self._body.decode("utf-8")