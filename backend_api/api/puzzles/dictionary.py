from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional, Union

from .errors import DictionaryLoadError

logger = logging.getLogger(__name__)


def _normalize(word: str) -> str:
    return word.lower()


# PUBLIC_INTERFACE
class WordDictionary:
    """Immutable, case-insensitive set of known words.

    Built once from a word source and shared read-only by every solve call.
    """

    __slots__ = ("_words", "source")

    def __init__(self, words: Iterable[str], source: Optional[str] = None):
        self._words: FrozenSet[str] = frozenset(_normalize(w) for w in words)
        self.source = source

    # PUBLIC_INTERFACE
    def contains(self, word: str) -> bool:
        """Return True if ``word`` is known, ignoring case."""
        return _normalize(word) in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"<WordDictionary words={len(self._words)} source={self.source!r}>"


def _clean_lines(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        word = line.rstrip("\r\n")
        if word:
            yield word


# PUBLIC_INTERFACE
def build_dictionary(word_source: Iterable[str], source: Optional[str] = None) -> WordDictionary:
    """Build a dictionary from an iterable of lines, one word per line.

    Line terminators are dropped, blank lines skipped and duplicate words
    (compared case-insensitively) collapse into a single entry.
    """
    return WordDictionary(_clean_lines(word_source), source=source)


# PUBLIC_INTERFACE
def load_dictionary(path: Union[str, Path]) -> WordDictionary:
    """Read a one-word-per-line UTF-8 file into a :class:`WordDictionary`.

    Raises:
        DictionaryLoadError: if the file is missing, cannot be read or holds
            no words.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            dictionary = build_dictionary(handle, source=str(path))
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Unable to read word list %s: %s", path, exc)
        raise DictionaryLoadError(f"Unable to read word list {str(path)!r}: {exc}") from exc

    if not len(dictionary):
        logger.error("Word list %s holds no words", path)
        raise DictionaryLoadError(f"Word list {str(path)!r} holds no words.")

    logger.info("Loaded %d words from %s", len(dictionary), path)
    return dictionary
