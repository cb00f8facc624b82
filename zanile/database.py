"""
Storage layer for notes on Redis, with an in-memory store for development and tests.
Notes are plain string values keyed by id; expiry is left to the store.
"""
import logging
import time
from typing import Dict, Optional, Union

from redis import Redis
from redis.exceptions import ConnectionError, RedisError

from zanile.exceptions import StoreError

logger = logging.getLogger(__name__)

MEMORY_URL = "memory://"


class InMemoryStore:
    """Simple in-memory store speaking the small subset of the Redis API we use."""

    def __init__(self):
        self.store: Dict[str, str] = {}
        self.expires_at: Dict[str, float] = {}

    def _now(self) -> float:
        return time.time()

    def set(self, key: str, value: str, ex: Optional[int] = None):
        """Store a value, optionally expiring after ``ex`` seconds."""
        self.store[key] = value
        if ex:
            self.expires_at[key] = self._now() + ex
        else:
            self.expires_at.pop(key, None)
        return True

    def get(self, key: str) -> Optional[str]:
        """Retrieve a value, or None if missing or expired."""
        if key not in self.store:
            return None

        deadline = self.expires_at.get(key)
        if deadline is not None and self._now() >= deadline:
            del self.store[key]
            del self.expires_at[key]
            return None

        return self.store[key]

    def ping(self):
        """Health check."""
        return True


class NoteStore:
    """Key-value access to notes: get by id and put with an optional TTL.

    There is no compare-and-swap; existence is learned by a get that misses.
    """

    def __init__(
        self,
        client: Union[Redis, InMemoryStore],
        key_prefix: str = "note:",
        using_fallback: bool = False,
    ):
        self.redis = client
        self.key_prefix = key_prefix
        self.using_fallback = using_fallback

    @classmethod
    def from_url(cls, url: str, key_prefix: str = "note:") -> "NoteStore":
        """Connect to Redis at ``url``, falling back to memory if it is unreachable."""
        if url == MEMORY_URL:
            logger.info("Using in-memory note store")
            return cls(InMemoryStore(), key_prefix=key_prefix, using_fallback=True)

        try:
            logger.info(f"Attempting to connect to Redis: {url[:30]}...")
            client = Redis.from_url(url, decode_responses=True)
            client.ping()
            logger.info("Redis connected successfully")
            return cls(client, key_prefix=key_prefix)
        except ConnectionError as e:
            logger.error(f"ConnectionError connecting to Redis: {type(e).__name__}: {e}")
        except RedisError as e:
            logger.error(f"Unexpected error connecting to Redis: {type(e).__name__}: {e}")

        logger.warning("Using in-memory fallback. Data will NOT persist across restarts.")
        return cls(InMemoryStore(), key_prefix=key_prefix, using_fallback=True)

    def _key(self, note_id: str) -> str:
        return f"{self.key_prefix}{note_id}"

    def is_healthy(self) -> bool:
        """Check if the store connection is alive."""
        try:
            self.redis.ping()
            return True
        except RedisError as e:
            logger.error(f"Health check failed: {e}")
        return False

    def get(self, note_id: str) -> Optional[str]:
        """
        Fetch a note's text.

        Args:
            note_id: Exact note identifier

        Returns:
            Note text, or None if absent or expired

        Raises:
            StoreError: If the store cannot be reached
        """
        try:
            return self.redis.get(self._key(note_id))
        except RedisError as e:
            logger.error(f"Error fetching note {note_id}: {e}")
            raise StoreError() from e

    def exists(self, note_id: str) -> bool:
        """True when a get for ``note_id`` hits."""
        return self.get(note_id) is not None

    def put(self, note_id: str, text: str, ttl_seconds: Optional[int] = None) -> None:
        """
        Save a note, overwriting any existing value under the same id.

        Args:
            note_id: Note identifier
            text: Note content
            ttl_seconds: Optional time-to-live in seconds

        Raises:
            StoreError: If the store cannot be reached
        """
        try:
            self.redis.set(self._key(note_id), text, ex=ttl_seconds or None)
        except RedisError as e:
            logger.error(f"Error saving note {note_id}: {e}")
            raise StoreError() from e
        logger.info(f"Note {note_id} saved (ttl={ttl_seconds})")
