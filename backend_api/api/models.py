from __future__ import annotations

from django.db import models


# PUBLIC_INTERFACE
class TimeStampedModel(models.Model):
    """Abstract base model providing created/updated timestamps."""
    created_at = models.DateTimeField(auto_now_add=True, help_text="Time when the record was created.")
    updated_at = models.DateTimeField(auto_now=True, help_text="Time when the record was last updated.")

    class Meta:
        abstract = True


# PUBLIC_INTERFACE
# Note: Do not perform any queries at module scope; the table may be read while
# building a dictionary, never while importing this module.
class Word(TimeStampedModel):
    """A known word, usable as a database-backed word source for the solver.

    Fields:
    - text: unique lowercased word text
    - length: derived length for quick filtering
    """
    text = models.CharField(max_length=64, unique=True, db_index=True, help_text="Lowercase word text.")
    length = models.PositiveSmallIntegerField(db_index=True, help_text="Length of the word.")

    class Meta:
        ordering = ["length", "text"]
        verbose_name = "Word"
        verbose_name_plural = "Words"

    def save(self, *args, **kwargs):
        # Normalize text, derive length on save
        if self.text:
            self.text = self.text.strip().lower()
            self.length = len(self.text)
        super().save(*args, **kwargs)

    def __str__(self) -> str:  # pragma: no cover
        return self.text
