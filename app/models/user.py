# app/models/user.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    A guest (or the host) of the baby shower.

    Identity:
      - name: lower-cased, stripped display name typed at login.
        Lookup-or-insert on that name is the only way rows get created.

    Role:
      - "guest" | "host"
      - decided once at creation from HOST_NAMES; never changed afterwards.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=80,
        index=True,
        description="Normalized display name (lower-case)",
    )

    role: str = Field(
        default="guest",
        index=True,
        description="Application role: guest | host",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
