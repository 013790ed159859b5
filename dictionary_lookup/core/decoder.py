"""Decode dictionary API responses into word entries"""

from pydantic import TypeAdapter, ValidationError

from ..exceptions import DecodeError
from ..logging_config import get_logger
from ..models.word_entry import WordEntry

logger = get_logger(__name__)

_ENTRIES_ADAPTER = TypeAdapter(list[WordEntry])


def decode_entries(payload: bytes | str) -> list[WordEntry]:
    """Parse a JSON array of entries.

    Any malformed JSON or shape mismatch, in any element, fails the whole
    payload with DecodeError.
    """
    try:
        entries = _ENTRIES_ADAPTER.validate_json(payload)
    except ValidationError as e:
        text = (
            payload.decode("utf-8", "replace")
            if isinstance(payload, bytes)
            else payload
        )
        first = e.errors()[0] if e.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        reason = first.get("msg", str(e))
        if location:
            reason = f"{reason} at '{location}'"
        raise DecodeError(reason, text) from e

    logger.debug(f"Decoded {len(entries)} entries")
    return entries
