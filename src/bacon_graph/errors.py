from __future__ import annotations


class LoadError(ValueError):
    """Raised when a record source cannot be read or is malformed."""


class GraphNotLoadedError(RuntimeError):
    """Raised when a graph is queried before a successful load."""
