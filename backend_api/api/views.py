from __future__ import annotations

from django.apps import apps
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status, permissions
from drf_yasg.utils import swagger_auto_schema

from .serializers import (
    SolveJumbleRequestSerializer,
    SolveJumbleResponseSerializer,
    DictionaryInfoSerializer,
)
from api.puzzles import InvalidInputError, JumbleEngine


def _loaded_dictionary():
    return apps.get_app_config("api").dictionary


# PUBLIC_INTERFACE
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health(request):
    """Health check endpoint for the API.

    Returns:
    - 200 OK with {"message": "Server is up!"}
    """
    return Response({"message": "Server is up!"})


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="solve_jumble",
    operation_summary="Solve a word jumble",
    operation_description="""
Find every dictionary word that can be formed from any subset of the jumble's
letters, in any order.

Request body:
- jumble (string, required): at most JUMBLE_MAX_LENGTH characters

Response:
- words: matched words, upper-cased, in discovery order (repeats kept)
- valid_count: number of matched words
- total_candidates: number of letter arrangements examined

Returns 503 when no dictionary has been loaded.
""",
    request_body=SolveJumbleRequestSerializer,
    responses={200: SolveJumbleResponseSerializer},
    tags=["jumble"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def solve_jumble(request):
    """Solve the posted jumble against the startup dictionary."""
    serializer = SolveJumbleRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    jumble: str = serializer.validated_data["jumble"]

    dictionary = _loaded_dictionary()
    if dictionary is None:
        return Response(
            {"error": "No dictionary is loaded."},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    try:
        result = JumbleEngine(dictionary).solve(jumble)
    except InvalidInputError as e:
        return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    resp = {
        "jumble": jumble,
        "words": result.words,
        "valid_count": len(result.words),
        "total_candidates": result.total_candidates,
    }
    return Response(SolveJumbleResponseSerializer(resp).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="dictionary_info",
    operation_summary="Describe the loaded dictionary",
    operation_description="Returns whether a dictionary is loaded, its size and where it came from.",
    responses={200: DictionaryInfoSerializer},
    tags=["jumble"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def dictionary_info(request):
    """Report on the dictionary loaded at startup."""
    dictionary = _loaded_dictionary()
    resp = {
        "loaded": dictionary is not None,
        "word_count": len(dictionary) if dictionary is not None else 0,
        "source": dictionary.source if dictionary is not None else None,
    }
    return Response(DictionaryInfoSerializer(resp).data, status=status.HTTP_200_OK)
