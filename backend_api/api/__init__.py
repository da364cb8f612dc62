"""
API package initializer.

Re-exports the jumble solving core so callers can import from api directly,
e.g.:

    from api import JumbleEngine, load_dictionary
"""

# PUBLIC_INTERFACE
from .puzzles import (
    JumbleEngine,
    JumbleResult,
    WordDictionary,
    build_dictionary,
    load_dictionary,
    DictionaryLoadError,
    InvalidInputError,
)

__all__ = [
    "JumbleEngine",
    "JumbleResult",
    "WordDictionary",
    "build_dictionary",
    "load_dictionary",
    "DictionaryLoadError",
    "InvalidInputError",
]
