from __future__ import annotations

from django.conf import settings
from rest_framework import serializers


def _max_jumble_length() -> int:
    return int(getattr(settings, "JUMBLE_MAX_LENGTH", 10))


# PUBLIC_INTERFACE
class SolveJumbleRequestSerializer(serializers.Serializer):
    """Request payload to solve a jumble.

    Fields:
    - jumble (required): letters to rearrange, at most JUMBLE_MAX_LENGTH long.
      Surrounding whitespace is trimmed; case is irrelevant.
    """

    jumble = serializers.CharField()

    def validate_jumble(self, value: str) -> str:
        limit = _max_jumble_length()
        if len(value) > limit:
            raise serializers.ValidationError(f"Jumble must be at most {limit} characters.")
        return value


# PUBLIC_INTERFACE
class SolveJumbleResponseSerializer(serializers.Serializer):
    """Response payload for a solved jumble."""

    jumble = serializers.CharField()
    words = serializers.ListField(
        child=serializers.CharField(), help_text="Matched words, upper-cased, in discovery order."
    )
    valid_count = serializers.IntegerField()
    total_candidates = serializers.IntegerField(help_text="Every letter arrangement examined.")


# PUBLIC_INTERFACE
class DictionaryInfoSerializer(serializers.Serializer):
    """Describes the dictionary loaded at startup."""

    loaded = serializers.BooleanField()
    word_count = serializers.IntegerField()
    source = serializers.CharField(allow_null=True)
