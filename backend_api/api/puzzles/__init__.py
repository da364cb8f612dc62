"""
Jumble solving core.

Exports:
- WordDictionary, build_dictionary and load_dictionary for word lookup
- JumbleEngine and JumbleResult for solving jumbles
- iter_selections, iter_orderings, iter_candidates and candidate_count for
  callers that want the enumeration itself
- JumbleError, DictionaryLoadError and InvalidInputError

These modules are framework-agnostic and can be reused by views, management
commands or plain scripts without importing Django.
"""

from .dictionary import WordDictionary, build_dictionary, load_dictionary
from .errors import JumbleError, DictionaryLoadError, InvalidInputError
from .jumble import (
    JumbleEngine,
    JumbleResult,
    candidate_count,
    iter_candidates,
    iter_orderings,
    iter_selections,
)

__all__ = [
    "WordDictionary",
    "build_dictionary",
    "load_dictionary",
    "JumbleError",
    "DictionaryLoadError",
    "InvalidInputError",
    "JumbleEngine",
    "JumbleResult",
    "candidate_count",
    "iter_candidates",
    "iter_orderings",
    "iter_selections",
]
