"""Missive — immutable HTTP messages and a conformance harness for them.

A case-insensitive, case-preserving, multi-valued header collection, a
reference message built on it, and a probe harness that checks any
message implementation against the same contract.

Basic usage::

    from missive import HTTPMessage

    message = HTTPMessage().with_header("Content-Type", "text/html")
    message.get_header("content-type")  # ["text/html"]

Conformance checking::

    from missive.testing import Collaborator, MessageHarness

    report = MessageHarness(Collaborator(MyMessage, MyStream)).run()
    print(report.summary())
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HarnessConfig",
    "HTTPMessage",
    "HeaderTypeError",
    "Headers",
    "InvalidHeaderError",
    "Message",
    "MissiveError",
]

# Public name -> defining module, resolved on first access
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "missive.errors",
    "HarnessConfig": "missive.config",
    "HTTPMessage": "missive.http.message",
    "HeaderTypeError": "missive.errors",
    "Headers": "missive.http.headers",
    "InvalidHeaderError": "missive.errors",
    "Message": "missive.http.message",
    "MissiveError": "missive.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import missive`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
