from __future__ import annotations

import logging
from typing import Iterable, List

from django.db import transaction

from .models import Word
from .puzzles import DictionaryLoadError, WordDictionary, build_dictionary

logger = logging.getLogger(__name__)


def _normalize_lines(lines: Iterable[str]) -> List[str]:
    """Lowercase, strip and deduplicate words, keeping first-seen order."""
    seen = set()
    words: List[str] = []
    for line in lines:
        word = line.strip().lower()
        if word and word not in seen:
            seen.add(word)
            words.append(word)
    return words


# PUBLIC_INTERFACE
def import_word_list(lines: Iterable[str], replace: bool = False) -> int:
    """Store the words of a one-word-per-line source in the Word table.

    Words already present are left untouched. With ``replace`` the table is
    emptied first.

    Returns number of words inserted.
    """
    words = _normalize_lines(lines)
    with transaction.atomic():
        if replace:
            Word.objects.all().delete()
        count_before = Word.objects.count()
        Word.objects.bulk_create(
            [Word(text=w, length=len(w)) for w in words],
            ignore_conflicts=True,
            batch_size=1000,
        )
        inserted = Word.objects.count() - count_before
    logger.info("Imported %d new words (%d read)", inserted, len(words))
    return inserted


# PUBLIC_INTERFACE
def load_dictionary_from_db() -> WordDictionary:
    """Build a dictionary from every row of the Word table.

    Raises:
        DictionaryLoadError: if the table holds no words.
    """
    texts = Word.objects.values_list("text", flat=True).iterator()
    dictionary = build_dictionary(texts, source="database")
    if not len(dictionary):
        raise DictionaryLoadError("The Word table is empty; run load_words first.")
    logger.info("Loaded %d words from the database", len(dictionary))
    return dictionary
