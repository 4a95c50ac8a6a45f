# stepsearch/core/errors.py
# Exceptions for bad configuration and misuse of a session.
# Running out of frontier is NOT an error: sessions report it through their flags.
from __future__ import annotations


class ConfigurationError(ValueError):
    """A graph, board, algorithm name or environment value that cannot be used."""


class SessionStateError(RuntimeError):
    """An operation that is not allowed in the session's current phase."""
