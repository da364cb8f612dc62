from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Protocol, Tuple

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

Positions = Tuple[int, ...]


class Lexicon(Protocol):
    """Minimal interface the engine needs from a dictionary."""

    def contains(self, word: str) -> bool: ...


def _require_jumble(jumble: Optional[str]) -> str:
    if not jumble:
        raise InvalidInputError("A non-empty jumble string is required.")
    return jumble


def _remove_at(pool: Positions, index: int) -> Positions:
    """Return ``pool`` without the element at ``index``."""
    if index < 0 or index >= len(pool):
        raise IndexError(f"index {index} out of range for pool of size {len(pool)}")
    return pool[:index] + pool[index + 1:]


# PUBLIC_INTERFACE
def candidate_count(length: int) -> int:
    """Number of candidates a jumble of ``length`` letters generates.

    Sum over k = 1..length of C(length, k) * k!, i.e. every ordering of every
    non-empty subset of positions.
    """
    return sum(math.perm(length, k) for k in range(1, length + 1))


# PUBLIC_INTERFACE
def iter_selections(length: int, choose: int, start: int = 0) -> Iterator[Positions]:
    """Yield every increasing tuple of ``choose`` positions out of ``start..length-1``.

    The first position advances left to right and, for each one, the remaining
    positions are chosen the same way from the suffix after it, so selections
    come out in lexicographic order:

        iter_selections(4, 2) -> (0, 1) (0, 2) (0, 3) (1, 2) (1, 3) (2, 3)
    """
    if choose == 0:
        yield ()
        return

    for first in range(start, length - choose + 1):
        for rest in iter_selections(length, choose - 1, first + 1):
            yield (first,) + rest


# PUBLIC_INTERFACE
def iter_orderings(pool: Positions, prefix: Positions = ()) -> Iterator[Positions]:
    """Yield every ordering of ``pool``, each element treated as distinct.

    Each remaining element is tried in turn as the next one and the rest of the
    pool (with that element removed by index) is ordered recursively. One and
    two element pools are emitted directly.
    """
    if len(pool) == 1:
        yield prefix + pool
        return

    if len(pool) == 2:
        yield prefix + (pool[0], pool[1])
        yield prefix + (pool[1], pool[0])
        return

    for i in range(len(pool)):
        yield from iter_orderings(_remove_at(pool, i), prefix + (pool[i],))


# PUBLIC_INTERFACE
def iter_candidates(jumble: str) -> Iterator[str]:
    """Yield every candidate string of ``jumble`` in solve order.

    Raises:
        InvalidInputError: if ``jumble`` is empty or None.
    """
    jumble = _require_jumble(jumble)
    return _generate(jumble)


def _generate(jumble: str) -> Iterator[str]:
    length = len(jumble)
    for choose in range(1, length + 1):
        for selection in iter_selections(length, choose):
            for ordering in iter_orderings(selection):
                yield "".join(jumble[p] for p in ordering)


# PUBLIC_INTERFACE
@dataclass
class JumbleResult:
    """Accumulated outcome of one solve call.

    - words: matched candidates, upper-cased, in the order they were found;
      repeats are kept
    - total_candidates: every candidate examined, matched or not
    """

    words: List[str] = field(default_factory=list)
    total_candidates: int = 0

    def record(self, candidate: str, is_word: bool) -> None:
        self.total_candidates += 1
        if is_word:
            self.words.append(candidate.upper())

    def summary(self) -> str:
        return (
            f"{len(self.words)} valid words found out of a possible "
            f"{self.total_candidates} set of words."
        )

    def __iter__(self):
        # Allows ``words, total = engine.solve(...)``
        yield self.words
        yield self.total_candidates


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class JumbleEngine:
    """Finds every dictionary word formed from any subset of a jumble's letters.

    The engine only reads its dictionary; each call to :meth:`solve` builds its
    own :class:`JumbleResult`, so one engine can serve concurrent callers.
    """

    dictionary: Lexicon

    # PUBLIC_INTERFACE
    def solve(self, jumble: str) -> JumbleResult:
        """Solve ``jumble``.

        Returns:
            JumbleResult with the matched words and the number of candidates
            examined.

        Raises:
            InvalidInputError: if ``jumble`` is empty or None.
        """
        jumble = _require_jumble(jumble)
        result = JumbleResult()
        contains = self.dictionary.contains
        for candidate in _generate(jumble):
            result.record(candidate, contains(candidate))

        logger.debug(
            "Solved jumble %r: %d matches out of %d candidates",
            jumble,
            len(result.words),
            result.total_candidates,
        )
        return result
