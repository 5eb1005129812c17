# app/models/gift_item.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class GiftItem(SQLModel, table=True):
    """
    Gift suggestion shown to guests.

    Rows come from the seed catalog or from the host's "add gift" form
    and are never edited afterwards.
    """

    __tablename__ = "gift_items"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    position: int = Field(
        index=True,
        description="Display order in the gift list",
    )

    name: str = Field(max_length=100)

    emoji: str = Field(default="🎁", max_length=16)

    suggested_quantity: int = Field(
        gt=0,
        description="How many units the host would like to receive",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
