# app/models/reservation.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Reservation(SQLModel, table=True):
    """
    One guest's promise to bring `quantity` units of one gift item.

    At most one row per (user_id, gift_item_id). This is kept by the
    lookup-then-update in the stores, not by a database constraint.
    """

    __tablename__ = "reservations"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
    )

    gift_item_id: uuid.UUID = Field(
        foreign_key="gift_items.id",
        index=True,
    )

    # Denormalized so the host view can list names without a join
    person_name: str = Field(max_length=80)

    quantity: int = Field(
        gt=0,
        description="Must be >= 1",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
