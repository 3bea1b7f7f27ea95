"""Harness configuration.

HarnessConfig is a frozen dataclass — immutable after creation, validated
up front, no string-key dict lookups scattered through the probes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from missive.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class HarnessConfig:
    """Conformance harness configuration. Immutable after creation.

    Skip probes an implementation deliberately does not support::

        config = HarnessConfig(
            skipped_tests={"body": "streams are compared by identity"},
            strict_separator=True,
        )
    """

    # Probe name -> human-readable reason; listed probes report SKIPPED
    skipped_tests: Mapping[str, str] = field(default_factory=dict)

    # Require exactly ", " between joined header values instead of ", ?"
    strict_separator: bool = False

    # Also require the message to == a shallow copy taken before each mutator
    compare_snapshots: bool = False

    def __post_init__(self) -> None:
        from missive.testing.harness import PROBE_NAMES

        unknown = sorted(set(self.skipped_tests) - set(PROBE_NAMES))
        if unknown:
            msg = (
                f"Unknown probe name(s) in skipped_tests: {', '.join(unknown)}. "
                f"Known probes: {', '.join(PROBE_NAMES)}"
            )
            raise ConfigurationError(msg)
        for probe, reason in self.skipped_tests.items():
            if not isinstance(reason, str):
                msg = f"Skip reason for {probe!r} must be a string, got {type(reason).__name__}"
                raise ConfigurationError(msg)
        object.__setattr__(self, "skipped_tests", MappingProxyType(dict(self.skipped_tests)))

    @classmethod
    def for_collaborator(cls, collaborator: Any, **overrides: Any) -> HarnessConfig:
        """Build a config from a collaborator's ``skipped_tests`` attribute.

        A collaborator without the attribute skips nothing. Keyword
        *overrides* are passed through (``strict_separator=True``).
        """
        skipped = getattr(collaborator, "skipped_tests", None) or {}
        return cls(skipped_tests=skipped, **overrides)
