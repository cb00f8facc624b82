"""
Note service: create and read notes against the store.
"""
import logging
from typing import Optional

from zanile.config import Settings
from zanile.database import NoteStore
from zanile.exceptions import EmptyText, IdTaken, InvalidId, TooLarge
from zanile.ids import allocate_unique_id, is_valid_id, normalize_id
from zanile.models import NoteCreated

logger = logging.getLogger(__name__)


class NoteService:
    """Creates and fetches notes. Holds no state beyond its store and settings."""

    def __init__(self, store: NoteStore, settings: Settings):
        self.store = store
        self.settings = settings

    def base_url(self, origin: str) -> str:
        """Public base URL for share links: APP_DOMAIN if set, else the request origin."""
        return (self.settings.app_domain or origin).rstrip("/")

    def create(self, text: str, custom_id: Optional[str] = None, origin: str = "") -> NoteCreated:
        """
        Create a new note.

        Args:
            text: Note content (non-empty)
            custom_id: Optional user-chosen id, normalized before use
            origin: Request origin used to build the share URL

        Returns:
            The note id and its shareable URL

        Raises:
            EmptyText: If text is empty
            TooLarge: If text exceeds the configured byte limit
            InvalidId: If the normalized custom id is not a valid id
            IdTaken: If the custom id is already in use
            AllocationExhausted: If no random id could be allocated
        """
        if not text:
            raise EmptyText()

        limit = self.settings.max_bytes
        size = len(text.encode("utf-8"))
        if size > limit:
            logger.info(f"Rejected note of {size} bytes (limit {limit})")
            raise TooLarge(limit)

        if custom_id:
            note_id = normalize_id(custom_id)
            if not is_valid_id(note_id):
                raise InvalidId()
            if self.store.exists(note_id):
                raise IdTaken()
        else:
            note_id = allocate_unique_id(self.store)

        self.store.put(note_id, text, ttl_seconds=self.settings.ttl_seconds)
        logger.info(f"Note {note_id} created ({size} bytes)")

        return NoteCreated(id=note_id, url=f"{self.base_url(origin)}/{note_id}")

    def read(self, note_id: str) -> Optional[str]:
        """Fetch a note's text by exact id; None if expired or never created."""
        return self.store.get(note_id)

    def read_raw(self, note_id: str) -> Optional[str]:
        """Same fetch as read; the caller serves it as plain text."""
        return self.store.get(note_id)

    def is_healthy(self) -> bool:
        return self.store.is_healthy()
