"""Shared type aliases used across missive modules."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeAlias

# Header value as accepted by with_header() / with_added_header()
HeaderValue: TypeAlias = str | Sequence[str] | Mapping[Any, str]

# Collaborator factories producing the implementation under test
MessageFactoryFn: TypeAlias = Callable[[], Any]
StreamFactoryFn: TypeAlias = Callable[[str], Any]
