# app/stores/base.py
import uuid
from dataclasses import dataclass, field
from typing import Protocol

from app.models.gift_item import GiftItem
from app.models.reservation import Reservation
from app.models.user import User


@dataclass
class GiftListing:
    """A gift item joined with every reservation made against it."""

    item: GiftItem
    reservations: list[Reservation] = field(default_factory=list)


@dataclass(frozen=True)
class GiftSeed:
    name: str
    emoji: str
    suggested_quantity: int


def group_reservations(
    items: list[GiftItem], reservations: list[Reservation]
) -> list[GiftListing]:
    """Attach reservations to their items, keeping the items' order."""
    by_item: dict[uuid.UUID, list[Reservation]] = {item.id: [] for item in items}
    for res in reservations:
        # Reservations pointing at an unknown item are ignored
        if res.gift_item_id in by_item:
            by_item[res.gift_item_id].append(res)
    return [GiftListing(item=item, reservations=by_item[item.id]) for item in items]


class RegistryStore(Protocol):
    """
    Operations the gift list needs from a backing store.

    Durability, isolation and uniqueness are left to the store itself;
    implementations only promise the end state of each call.
    All failures surface as app.core.exceptions.StoreError.
    """

    # ----- Users -----

    def get_user(self, user_id: uuid.UUID) -> User | None: ...

    def list_users(self) -> list[User]: ...

    def get_or_create_user(self, name: str, role: str = "guest") -> User: ...

    # ----- Gift items -----

    def get_gift_item(self, gift_item_id: uuid.UUID) -> GiftItem | None: ...

    def list_gift_items_with_reservations(self) -> list[GiftListing]: ...

    def add_gift_item(self, name: str, emoji: str, suggested_quantity: int) -> GiftItem: ...

    def count_gift_items(self) -> int: ...

    def seed_gift_items(self, seeds: list[GiftSeed]) -> None: ...

    # ----- Reservations -----

    def reserve(
        self,
        user_id: uuid.UUID,
        gift_item_id: uuid.UUID,
        person_name: str,
        quantity: int,
    ) -> Reservation: ...

    def unreserve(self, user_id: uuid.UUID, gift_item_id: uuid.UUID) -> bool: ...
