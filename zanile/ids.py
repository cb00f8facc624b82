"""
Note identifiers: normalizing custom ids and allocating random ones.
"""
import logging
import re
import secrets

from zanile.database import NoteStore
from zanile.exceptions import AllocationExhausted

logger = logging.getLogger(__name__)

ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
MAX_ID_LENGTH = 64

# (length, attempts) tried in order by allocate_unique_id
ALLOCATION_ROUNDS = ((8, 5), (12, 5))

_ID_PATTERN = re.compile(r"^[a-z0-9-]{1,64}$")
_DISALLOWED = re.compile(r"[^a-z0-9-]")
_DASH_RUNS = re.compile(r"-+")


def normalize_id(raw_id: str) -> str:
    """
    Turn user input into id form.

    "  My Note!! " becomes "my-note": lowercased, anything outside
    [a-z0-9-] replaced by "-", dash runs collapsed, edge dashes stripped.
    """
    note_id = raw_id.strip().lower()
    note_id = _DISALLOWED.sub("-", note_id)
    note_id = _DASH_RUNS.sub("-", note_id)
    return note_id.strip("-")


def is_valid_id(note_id: str) -> bool:
    """True for 1-64 characters of a-z, 0-9 and "-"."""
    return bool(_ID_PATTERN.fullmatch(note_id))


def random_id(length: int) -> str:
    """Random id of ``length`` characters from a-z0-9, drawn from a CSPRNG."""
    return "".join(ALPHABET[b % len(ALPHABET)] for b in secrets.token_bytes(length))


def allocate_unique_id(store: NoteStore) -> str:
    """
    Generate an id the store does not currently hold.

    Args:
        store: Note store probed for each candidate

    Returns:
        An id that was absent at the moment it was probed

    Raises:
        AllocationExhausted: If every candidate was taken

    Nothing is reserved between the probe and the caller's write, so two
    concurrent requests can end up writing the same id; the last write wins.
    """
    for length, attempts in ALLOCATION_ROUNDS:
        for _ in range(attempts):
            candidate = random_id(length)
            if not store.exists(candidate):
                return candidate
            logger.warning(f"Generated id collided with an existing note (length {length})")

    logger.error("Could not allocate a unique note id")
    raise AllocationExhausted()
