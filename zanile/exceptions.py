"""
Application exceptions.

Every error carries the client-facing message and HTTP status it maps to;
the handlers registered in main.py turn them into responses.

    ClipboardError
    ├── EmptyText            → 400
    ├── TooLarge             → 413
    ├── InvalidId            → 400
    ├── IdTaken              → 409
    ├── MalformedRequest     → 400
    ├── AllocationExhausted  → 500
    ├── NotFound             → 404 (plain text)
    └── StoreError           → 500
"""
from typing import Optional


class ClipboardError(Exception):
    """Base exception for all clipboard errors."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyText(ClipboardError):
    status_code = 400
    default_message = "Text is required"


class TooLarge(ClipboardError):
    """Raised when a note's UTF-8 size exceeds the configured limit."""

    status_code = 413

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Too large. Limit {limit} bytes")


class InvalidId(ClipboardError):
    status_code = 400
    default_message = "Invalid id"


class IdTaken(ClipboardError):
    status_code = 409
    default_message = "ID already exists"


class MalformedRequest(ClipboardError):
    status_code = 400
    default_message = "Bad Request"


class AllocationExhausted(ClipboardError):
    """Raised when every random id probed was already taken."""

    status_code = 500
    default_message = "Could not generate unique id"


class NotFound(ClipboardError):
    """Missing note. Expired and never-created notes are not told apart."""

    status_code = 404
    default_message = "Not found"


class StoreError(ClipboardError):
    """Raised when the key-value store fails."""

    status_code = 500
    default_message = "Internal Server Error"
