"""HTTP message contract and a reference implementation.

``Message`` is the structural protocol the conformance harness drives.
``HTTPMessage`` implements it on top of ``Headers`` with the same
chainable ``.with_*()`` style as the rest of missive: each
transformation returns a new message and the receiver never changes.

Usage::

    message = (
        HTTPMessage()
        .with_protocol_version("2")
        .with_header("Content-Type", "text/html")
        .with_added_header("Vary", ["Accept", "Cookie"])
    )
    message.get_header_line("vary")  # "Accept, Cookie"
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Protocol, runtime_checkable

from missive._internal.types import HeaderValue
from missive.errors import HeaderTypeError, InvalidHeaderError
from missive.http.headers import Headers

DEFAULT_PROTOCOL_VERSION = "1.1"


@runtime_checkable
class Message(Protocol):
    """An immutable HTTP message: protocol version, headers, body.

    Readers never fail for absent headers. Every ``with_*`` method
    returns a new message; header mutators raise only ``TypeError`` or
    ``ValueError`` (or subclasses) for invalid names and values.
    """

    def get_protocol_version(self) -> str: ...
    def with_protocol_version(self, version: str) -> Message: ...
    def get_headers(self) -> dict[str, list[str]]: ...
    def has_header(self, name: str) -> bool: ...
    def get_header(self, name: str) -> list[str]: ...
    def get_header_line(self, name: str) -> str: ...
    def with_header(self, name: str, value: HeaderValue) -> Message: ...
    def with_added_header(self, name: str, value: HeaderValue) -> Message: ...
    def without_header(self, name: str) -> Message: ...
    def get_body(self) -> Any: ...
    def with_body(self, body: Any) -> Message: ...


@dataclass(frozen=True, slots=True)
class HTTPMessage:
    """Reference ``Message`` built through immutable transformations.

    The body is an opaque handle: it is stored and returned as given,
    never read.
    """

    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    headers: Headers = field(default_factory=Headers)
    body: Any = None

    # -- Protocol version --

    def get_protocol_version(self) -> str:
        return self.protocol_version

    def with_protocol_version(self, version: str) -> HTTPMessage:
        """Return a new message with a different protocol version."""
        if not isinstance(version, str):
            msg = f"Protocol version must be a string, got {type(version).__name__}"
            raise HeaderTypeError(msg)
        if not version:
            raise InvalidHeaderError(name="", reason="protocol version must not be empty")
        return replace(self, protocol_version=version)

    # -- Header readers --

    def get_headers(self) -> dict[str, list[str]]:
        return self.headers.as_dict()

    def has_header(self, name: str) -> bool:
        return name in self.headers

    def get_header(self, name: str) -> list[str]:
        return self.headers.get_list(name)

    def get_header_line(self, name: str) -> str:
        return self.headers.get_line(name)

    # -- Header transformations --

    def with_header(self, name: str, value: HeaderValue) -> HTTPMessage:
        """Return a new message where *name* holds exactly *value*."""
        return replace(self, headers=self.headers.with_header(name, value))

    def with_added_header(self, name: str, value: HeaderValue) -> HTTPMessage:
        """Return a new message with *value* appended to *name*."""
        return replace(self, headers=self.headers.with_added_header(name, value))

    def without_header(self, name: str) -> HTTPMessage:
        """Return a new message without *name* (no-op if absent)."""
        return replace(self, headers=self.headers.without_header(name))

    # -- Body --

    def get_body(self) -> Any:
        return self.body

    def with_body(self, body: Any) -> HTTPMessage:
        """Return a new message carrying *body*."""
        return replace(self, body=body)
