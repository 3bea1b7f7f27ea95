"""Immutable, case-insensitive, case-preserving HTTP headers.

Implements ``Mapping[str, str]`` plus multi-value accessors.
Entries are keyed by the lower-cased name; each entry remembers the
casing it was first stored under and is enumerated by that name.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from missive._internal.types import HeaderValue
from missive.http.validation import normalize_header_value, validate_header_name

# Separator used by get_line() when joining multiple values
HEADER_LINE_SEPARATOR = ", "


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive, multi-valued HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values, ``get_line`` joins them with ``", "``.
    ``with_header`` / ``with_added_header`` / ``without_header`` return
    a new ``Headers``; the receiver never changes.
    """

    __slots__ = ("_entries",)

    def __init__(
        self,
        headers: Mapping[str, HeaderValue] | Iterable[tuple[str, HeaderValue]] = (),
    ) -> None:
        if isinstance(headers, Headers):
            object.__setattr__(self, "_entries", dict(headers._entries))
            return
        entries: dict[str, tuple[str, tuple[str, ...]]] = {}
        items = headers.items() if isinstance(headers, Mapping) else headers
        for name, value in items:
            name = validate_header_name(name)
            values = normalize_header_value(value, name=name)
            key = name.lower()
            if key in entries:
                canonical, existing = entries[key]
                entries[key] = (canonical, existing + values)
            else:
                entries[key] = (name, values)
        object.__setattr__(self, "_entries", entries)

    @classmethod
    def _from_entries(cls, entries: dict[str, tuple[str, tuple[str, ...]]]) -> Headers:
        headers = cls.__new__(cls)
        object.__setattr__(headers, "_entries", entries)
        return headers

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    # -- Mapping interface --

    def __getitem__(self, key: str) -> str:
        entry = self._lookup(key)
        if entry is None:
            raise KeyError(key)
        return entry[1][0]

    def __contains__(self, key: object) -> bool:
        return self._lookup(key) is not None

    def __iter__(self) -> Iterator[str]:
        for canonical, _ in self._entries.values():
            yield canonical

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(tuple(self._entries.values()))

    # Immutable: copies share the instance, pickling rebuilds from values
    def __copy__(self) -> Headers:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Headers:
        return self

    def __reduce__(self) -> tuple[type[Headers], tuple[dict[str, list[str]]]]:
        return (type(self), (self.as_dict(),))

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {list(values)!r}" for name, values in self._entries.values())
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    # -- Multi-value access --

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* in insertion order, ``[]`` if missing."""
        entry = self._lookup(key)
        if entry is None:
            return []
        return list(entry[1])

    def get_line(self, key: str) -> str:
        """Return all values for *key* joined by ``", "``, ``""`` if missing."""
        return HEADER_LINE_SEPARATOR.join(self.get_list(key))

    def as_dict(self) -> dict[str, list[str]]:
        """Return a ``{canonical_name: [values]}`` copy of every header."""
        return {name: list(values) for name, values in self._entries.values()}

    # -- Copy-on-write transformations --

    def with_header(self, name: str, value: HeaderValue) -> Headers:
        """Return new Headers where *name* holds exactly *value*.

        Any existing entry matching *name* case-insensitively is replaced,
        and *name* (as given) becomes the canonical casing.
        """
        name = validate_header_name(name)
        values = normalize_header_value(value, name=name)
        key = name.lower()
        entries = {k: v for k, v in self._entries.items() if k != key}
        entries[key] = (name, values)
        return self._from_entries(entries)

    def with_added_header(self, name: str, value: HeaderValue) -> Headers:
        """Return new Headers with *value* appended to *name*.

        An existing entry keeps its canonical casing and gains the new
        values at the end; otherwise this behaves like ``with_header``.
        """
        name = validate_header_name(name)
        values = normalize_header_value(value, name=name)
        key = name.lower()
        entries = dict(self._entries)
        if key in entries:
            canonical, existing = entries[key]
            entries[key] = (canonical, existing + values)
        else:
            entries[key] = (name, values)
        return self._from_entries(entries)

    def without_header(self, name: str) -> Headers:
        """Return new Headers without *name*. Missing names are a no-op."""
        if name not in self:
            return self._from_entries(dict(self._entries))
        key = name.lower()
        return self._from_entries({k: v for k, v in self._entries.items() if k != key})

    def _lookup(self, key: object) -> tuple[str, tuple[str, ...]] | None:
        if not isinstance(key, str):
            return None
        return self._entries.get(key.lower())
