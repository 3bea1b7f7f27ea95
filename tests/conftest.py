"""Shared fixtures: a test-only body stream and the reference collaborator."""

from dataclasses import dataclass

import pytest

from missive.http.message import HTTPMessage
from missive.testing.collaborator import Collaborator


@dataclass(frozen=True, slots=True)
class TextStream:
    """Minimal body handle: compares equal when the content is equal."""

    content: str


@pytest.fixture
def collaborator() -> Collaborator:
    return Collaborator(message_factory=HTTPMessage, stream_factory=TextStream)


@pytest.fixture
def stream_factory() -> type[TextStream]:
    return TextStream
