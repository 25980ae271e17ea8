"""Payload models for the bubble API.

Clients send ``{"Bubble": "..."}``. The lower-case ``bubble`` key is
accepted too, since the not-found response uses that spelling and
clients tend to echo what they read.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr

#: Body returned when a read misses. Kept in this exact shape for
#: compatibility with existing frontends.
NOT_FOUND_PAYLOAD: dict[str, Any] = {"bubble": None}

#: Body returned after a successful write.
WRITE_OK_PAYLOAD: dict[str, Any] = {}


class BubbleWrite(BaseModel):
    """Request body of ``POST /api/bubble/{id}``."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    bubble: StrictStr = Field(alias="Bubble")


class BubbleRead(BaseModel):
    """Response body of a successful ``GET /api/bubble/{id}``."""

    model_config = ConfigDict(frozen=True)

    bubble: str = Field(serialization_alias="Bubble")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
