"""
Pydantic models for request/response validation.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class NoteCreate(BaseModel):
    """Schema for creating a new note.

    Lenient: a non-string text reads as empty, and a non-string or empty
    id reads as "no custom id".
    """
    text: str = Field("", description="Text content (required, non-empty)")
    id: Optional[str] = Field(None, description="Optional custom id, normalized before use")

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) and value else None

    @classmethod
    def from_payload(cls, payload: Any) -> "NoteCreate":
        """Build from decoded JSON; anything but an object has no fields."""
        return cls.model_validate(payload if isinstance(payload, dict) else {})


class NoteCreated(BaseModel):
    """Schema for note creation response."""
    id: str = Field(..., description="Note id")
    url: str = Field(..., description="Shareable URL to view the note")


class ErrorResponse(BaseModel):
    """Schema for API error bodies."""
    error: str = Field(..., description="Human-readable error message")


class HealthCheck(BaseModel):
    """Schema for health check response."""
    ok: bool = Field(..., description="Is the application healthy?")
