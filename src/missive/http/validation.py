"""Header name and value validation.

Every header mutation funnels through these two functions, so the
accepted shapes are defined in one place::

    validate_header_name("Content-Type")          # -> "Content-Type"
    normalize_header_value("text/html")           # -> ("text/html",)
    normalize_header_value(["gzip", "br"])        # -> ("gzip", "br")
    normalize_header_value(["1", 2])              # -> ("1", "2")
    normalize_header_value({"a": "x", "b": "y"})  # -> ("x", "y")

Wrong types raise ``HeaderTypeError``; right types with bad content
raise ``InvalidHeaderError``. Nothing else is raised.
"""

import re
from collections.abc import Mapping, Sequence

from missive.errors import HeaderTypeError, InvalidHeaderError

# RFC 7230 §3.2.6: token = 1*tchar
_TOKEN_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# Characters that would terminate or split a header line on the wire
_FORBIDDEN_VALUE_PATTERN = re.compile(r"[\r\n\x00]")

# Optional whitespace surrounding a field value
_OWS = " \t"


def validate_header_name(name: object) -> str:
    """Return *name* unchanged if it is a valid header name.

    Raises:
        HeaderTypeError: *name* is not a ``str`` (lists, booleans,
            numbers, ``None`` and arbitrary objects are all rejected).
        InvalidHeaderError: *name* is empty or not an HTTP token.
    """
    if not isinstance(name, str):
        msg = f"Header name must be a string, got {type(name).__name__}"
        raise HeaderTypeError(msg)
    if not name:
        raise InvalidHeaderError(name="", reason="name must not be empty")
    if _TOKEN_PATTERN.fullmatch(name) is None:
        raise InvalidHeaderError(name=name, reason="name is not a valid HTTP token")
    return name


def normalize_header_value(value: object, *, name: str = "") -> tuple[str, ...]:
    """Normalize a header value to an ordered tuple of strings.

    A string becomes a one-element tuple. A sequence keeps its order;
    int and float elements are converted with ``str()``, bools are not.
    A mapping contributes its values in iteration order; keys are
    discarded. Surrounding spaces and tabs are stripped from each value.

    Raises:
        HeaderTypeError: *value* is not a string or sequence, or one of
            its elements is neither a string nor a number.
        InvalidHeaderError: *value* is an empty sequence/mapping, or an
            element contains CR, LF, or NUL.
    """
    if isinstance(value, str):
        items: list[object] = [value]
    elif isinstance(value, (bytes, bytearray)):
        msg = f"Header value for {name!r} must be str, not {type(value).__name__}"
        raise HeaderTypeError(msg)
    elif isinstance(value, Mapping):
        items = list(value.values())
    elif isinstance(value, Sequence):
        items = list(value)
    else:
        msg = (
            f"Header value for {name!r} must be a string or a sequence of strings, "
            f"got {type(value).__name__}"
        )
        raise HeaderTypeError(msg)

    if not items:
        raise InvalidHeaderError(name=name, reason="value must not be an empty sequence")
    return tuple(_clean_value(item, name) for item in items)


def _clean_value(item: object, name: str) -> str:
    # bool is an int subclass but never a header value
    if isinstance(item, (int, float)) and not isinstance(item, bool):
        item = str(item)
    if not isinstance(item, str):
        msg = (
            f"Header value for {name!r} must contain only strings or numbers, "
            f"got {type(item).__name__}"
        )
        raise HeaderTypeError(msg)
    if _FORBIDDEN_VALUE_PATTERN.search(item):
        raise InvalidHeaderError(name=name, reason="value must not contain CR, LF, or NUL")
    return item.strip(_OWS)
