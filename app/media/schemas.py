"""
Media — Pydantic V2 models used between the controller and the service.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Base(BaseModel):
    # No whitespace stripping: owner id and field name form the object key verbatim
    model_config = ConfigDict(
        extra="forbid",
    )


class UploadAvatarRequest(_Base):
    """An avatar upload as received over RPC."""
    id: str = Field(default="", description="Owner of the avatar")
    field_name: str = Field(default="", description="Form field the file came from")
    buffer: bytes | None = Field(default=None, repr=False)
    original_name: str = ""
    mime_type: str = ""
    size: int = 0

    @classmethod
    def from_message(cls, message: Any) -> UploadAvatarRequest:
        # proto3 has no presence for bytes; an empty buffer means none was sent
        return cls(
            id=message.id,
            field_name=message.field_name,
            buffer=message.buffer or None,
            original_name=message.original_name,
            mime_type=message.mime_type,
            size=message.size,
        )


class StatusResponse(_Base):
    success: bool
    message: str
