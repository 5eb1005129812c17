# app/schemas/gift.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class GiftItemCreate(SQLModel):
    """
    Payload for the host's "add gift" form.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    emoji: str = Field(default="🎁", max_length=16)
    suggested_quantity: int = Field(default=1, gt=0)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v

    @field_validator("emoji")
    @classmethod
    def default_emoji(cls, v: str) -> str:
        return v.strip() or "🎁"


class ReservationRequest(SQLModel):
    """
    Payload for PUT /gifts/{id}/reservation.
    """

    model_config = ConfigDict(extra="forbid")

    quantity: int = Field(gt=0)


class ReservationRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    person_name: str
    quantity: int


class GiftItemRead(SQLModel):
    """
    A gift item as seen by the requesting guest.

    The tally fields are re-derived from `reservations` on every request.
    """

    id: uuid.UUID
    position: int
    name: str
    emoji: str
    suggested_quantity: int
    created_at: datetime
    reservations: list[ReservationRead]

    promised_quantity: int
    remaining_quantity: int
    is_complete: bool
    max_allowed_quantity: int
    my_quantity: int


class GiftItemSummary(SQLModel):
    """A gift item without reservations (response of the "add gift" form)."""

    id: uuid.UUID
    position: int
    name: str
    emoji: str
    suggested_quantity: int
    created_at: datetime
