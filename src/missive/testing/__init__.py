"""Conformance testing for ``Message`` implementations.

Provides the probe harness, its collaborator surface, outcome types and
assertion helpers. All public names are re-exported here::

    from missive.testing import Collaborator, MessageHarness

The pytest adapter lives in ``missive.testing.suite`` and is not
imported here, so the harness is usable without pytest installed.
"""

from missive.testing.assertions import (
    MessageSnapshot,
    assert_has_header,
    assert_header_line,
    assert_header_line_contains,
    assert_header_line_is,
    assert_header_values,
    assert_lacks_header,
    assert_new_instance,
    assert_unchanged,
    capture,
    header_line_pattern,
)
from missive.testing.collaborator import Collaborator, MessageFactory
from missive.testing.harness import INVALID_HEADER_ARGUMENTS, PROBE_NAMES, MessageHarness
from missive.testing.outcomes import (
    ACCEPTED_ERROR_KINDS,
    ConformanceReport,
    ProbeOutcome,
    Rejection,
    RejectionOutcome,
    Status,
    expect_rejection,
)

__all__ = [
    "ACCEPTED_ERROR_KINDS",
    "INVALID_HEADER_ARGUMENTS",
    "PROBE_NAMES",
    "Collaborator",
    "ConformanceReport",
    "MessageFactory",
    "MessageHarness",
    "MessageSnapshot",
    "ProbeOutcome",
    "Rejection",
    "RejectionOutcome",
    "Status",
    "assert_has_header",
    "assert_header_line",
    "assert_header_line_contains",
    "assert_header_line_is",
    "assert_header_values",
    "assert_lacks_header",
    "assert_new_instance",
    "assert_unchanged",
    "capture",
    "expect_rejection",
    "header_line_pattern",
]
