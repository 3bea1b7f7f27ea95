"""Collaborator surface — how the harness obtains instances under test.

The harness never names a concrete message or stream type. It is handed
anything satisfying ``MessageFactory``: an adapter class, a test class,
or a ``Collaborator`` wrapping two plain callables::

    collaborator = Collaborator(
        message_factory=MyMessage,
        stream_factory=MyStream.from_string,
        skipped_tests={"body": "streams compare by identity"},
    )
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from missive._internal.types import MessageFactoryFn, StreamFactoryFn


@runtime_checkable
class MessageFactory(Protocol):
    """Supplies fresh messages and body streams to the harness.

    ``get_message`` must return a new instance in its default state
    (default protocol version, no headers, empty or ``None`` body) on
    every call. Two streams built from the same content must compare
    equal. An optional ``skipped_tests`` attribute maps probe names to
    skip reasons.
    """

    def get_message(self) -> Any: ...
    def build_stream(self, content: str) -> Any: ...


@dataclass(frozen=True, slots=True)
class Collaborator:
    """A ``MessageFactory`` built from a pair of callables."""

    message_factory: MessageFactoryFn
    stream_factory: StreamFactoryFn
    skipped_tests: Mapping[str, str] = field(default_factory=dict)

    def get_message(self) -> Any:
        return self.message_factory()

    def build_stream(self, content: str) -> Any:
        return self.stream_factory(content)
