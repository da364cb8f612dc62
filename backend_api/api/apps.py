from __future__ import annotations

import logging
from typing import Optional

from django.apps import AppConfig
from django.conf import settings

from .puzzles import WordDictionary, load_dictionary

logger = logging.getLogger(__name__)


class ApiConfig(AppConfig):
    """App config owning the process-wide word dictionary.

    When ``JUMBLE_WORD_LIST`` is configured the dictionary is built here, once,
    at startup. A word list that cannot be read aborts startup.
    """
    default_auto_field = "django.db.models.BigAutoField"
    name = "api"

    dictionary: Optional[WordDictionary] = None

    def ready(self) -> None:
        path = getattr(settings, "JUMBLE_WORD_LIST", None)
        if not path:
            logger.info("JUMBLE_WORD_LIST is not set; no dictionary loaded at startup.")
            return
        self.dictionary = load_dictionary(path)
