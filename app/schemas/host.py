# app/schemas/host.py
import uuid

from pydantic import ConfigDict
from sqlmodel import SQLModel


class GuestReservationLine(SQLModel):
    """
    One reserved gift inside a guest's row of the host table.
    """
    model_config = ConfigDict(extra="forbid")

    gift_item_id: uuid.UUID
    item_name: str
    item_emoji: str
    quantity: int
    suggested_quantity: int


class GuestSummary(SQLModel):
    """
    Everything one guest promised to bring.
    """
    model_config = ConfigDict(extra="forbid")

    user_id: uuid.UUID
    name: str
    reservations: list[GuestReservationLine]
    total_items: int


class HostStats(SQLModel):
    """
    Headline numbers for the host page.
    """
    model_config = ConfigDict(extra="forbid")

    total_guests: int
    guests_with_reservations: int
    guests_without_reservations: int
    total_reservations: int
    total_items: int
    total_gifts: int
    reserved_gifts: int
    complete_gifts: int
    coverage_percent: int


class HostSummary(SQLModel):
    """
    Full payload for the host page.
    """
    model_config = ConfigDict(extra="forbid")

    guests: list[GuestSummary]
    stats: HostStats
