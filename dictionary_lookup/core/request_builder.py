"""Lookup URL construction"""

from urllib.parse import quote

from ..config.settings import settings
from .constants import ApiConstants


def build_lookup_url(
    word: str,
    base_url: str | None = None,
    api_version: str | None = None,
    language: str | None = None,
) -> str:
    """Build the entries URL for a word.

    Surrounding whitespace is stripped and the word is percent-encoded as a
    single path segment. Omitted arguments fall back to ``settings.api``.
    """
    base = (base_url if base_url is not None else settings.api.base_url).rstrip("/")
    path = ApiConstants.ENTRIES_PATH.format(
        version=api_version if api_version is not None else settings.api.api_version,
        language=language if language is not None else settings.api.language,
        word=quote(word.strip(), safe=""),
    )
    return f"{base}/{path}"
