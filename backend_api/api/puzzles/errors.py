from __future__ import annotations


# PUBLIC_INTERFACE
class JumbleError(Exception):
    """Base class for errors raised by the jumble solver."""


# PUBLIC_INTERFACE
class DictionaryLoadError(JumbleError):
    """The word source is missing, unreadable or empty.

    This is a startup failure: the solver cannot run without a dictionary.
    """


# PUBLIC_INTERFACE
class InvalidInputError(JumbleError, ValueError):
    """The jumble to solve is empty or missing."""
