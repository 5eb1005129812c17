# app/schemas/user.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

# "host" is the mother of the baby; everybody else is a guest.
Role = Literal["guest", "host"]


def normalize_name(v: str) -> str:
    """Strip and lower-case a display name; reject blanks."""
    v = v.strip().lower()
    if not v:
        raise ValueError("name cannot be empty")
    return v


class LoginRequest(SQLModel):
    """
    Payload for POST /session.

    The name is case-normalized so "Ana", " ana " and "ANA" are one guest.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=80)

    @field_validator("name")
    @classmethod
    def normalize(cls, v: str) -> str:
        return normalize_name(v)


class UserRead(SQLModel):
    """Response schema returned to clients."""

    id: uuid.UUID
    name: str
    role: Role
    created_at: datetime


class SessionRead(SQLModel):
    """Token + profile returned after login."""

    access_token: str
    token_type: str = "bearer"
    user: UserRead
