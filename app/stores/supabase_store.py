# app/stores/supabase_store.py
import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from app.core.exceptions import StoreError
from app.models.gift_item import GiftItem
from app.models.reservation import Reservation
from app.models.user import User
from app.stores.base import GiftListing, GiftSeed, group_reservations

logger = logging.getLogger(__name__)

USERS_TABLE = "users"
GIFT_ITEMS_TABLE = "gift_items"
RESERVATIONS_TABLE = "reservations"


class SupabaseRegistryStore:
    """
    RegistryStore over the Supabase PostgREST table API.

    Uses the same three tables as the SQL store. Upserts are done by
    lookup-then-update/insert; there is no transaction across calls.
    """

    def __init__(self, client: Client):
        self.client = client

    @contextmanager
    def _api_call(self, action: str):
        try:
            yield
        except (APIError, httpx.HTTPError) as exc:
            logger.exception("Supabase error while trying to %s", action)
            raise StoreError() from exc

    def _table(self, name: str):
        return self.client.table(name)

    # ----- Users -----

    def get_user(self, user_id: uuid.UUID) -> User | None:
        with self._api_call("load user"):
            resp = self._table(USERS_TABLE).select("*").eq("id", str(user_id)).limit(1).execute()
        return User.model_validate(resp.data[0]) if resp.data else None

    def list_users(self) -> list[User]:
        with self._api_call("list users"):
            resp = self._table(USERS_TABLE).select("*").order("created_at").execute()
        return [User.model_validate(row) for row in resp.data]

    def get_or_create_user(self, name: str, role: str = "guest") -> User:
        with self._api_call("log in"):
            resp = self._table(USERS_TABLE).select("*").eq("name", name).limit(1).execute()
            if resp.data:
                return User.model_validate(resp.data[0])

            logger.info("Creating user %r with role %s", name, role)
            user = User(name=name, role=role)
            resp = self._table(USERS_TABLE).insert(user.model_dump(mode="json")).execute()
        return User.model_validate(resp.data[0]) if resp.data else user

    # ----- Gift items -----

    def get_gift_item(self, gift_item_id: uuid.UUID) -> GiftItem | None:
        with self._api_call("load gift item"):
            resp = (
                self._table(GIFT_ITEMS_TABLE)
                .select("*")
                .eq("id", str(gift_item_id))
                .limit(1)
                .execute()
            )
        return GiftItem.model_validate(resp.data[0]) if resp.data else None

    def list_gift_items_with_reservations(self) -> list[GiftListing]:
        with self._api_call("load the gift list"):
            items_resp = self._table(GIFT_ITEMS_TABLE).select("*").order("position").execute()
            res_resp = self._table(RESERVATIONS_TABLE).select("*").order("created_at").execute()
        items = [GiftItem.model_validate(row) for row in items_resp.data]
        reservations = [Reservation.model_validate(row) for row in res_resp.data]
        return group_reservations(items, reservations)

    def add_gift_item(self, name: str, emoji: str, suggested_quantity: int) -> GiftItem:
        with self._api_call("add gift item"):
            last = (
                self._table(GIFT_ITEMS_TABLE)
                .select("position")
                .order("position", desc=True)
                .limit(1)
                .execute()
            )
            position = (last.data[0]["position"] if last.data else 0) + 1
            item = GiftItem(
                position=position,
                name=name,
                emoji=emoji,
                suggested_quantity=suggested_quantity,
            )
            resp = self._table(GIFT_ITEMS_TABLE).insert(item.model_dump(mode="json")).execute()
        return GiftItem.model_validate(resp.data[0]) if resp.data else item

    def count_gift_items(self) -> int:
        with self._api_call("count gift items"):
            resp = self._table(GIFT_ITEMS_TABLE).select("id", count="exact").execute()
        return int(resp.count or 0)

    def seed_gift_items(self, seeds: list[GiftSeed]) -> None:
        rows = [
            GiftItem(
                position=i,
                name=seed.name,
                emoji=seed.emoji,
                suggested_quantity=seed.suggested_quantity,
            ).model_dump(mode="json")
            for i, seed in enumerate(seeds, start=1)
        ]
        with self._api_call("seed gift items"):
            self._table(GIFT_ITEMS_TABLE).insert(rows).execute()

    # ----- Reservations -----

    def _find_reservation(self, user_id: uuid.UUID, gift_item_id: uuid.UUID) -> dict | None:
        resp = (
            self._table(RESERVATIONS_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .eq("gift_item_id", str(gift_item_id))
            .limit(1)
            .execute()
        )
        return resp.data[0] if resp.data else None

    def reserve(
        self,
        user_id: uuid.UUID,
        gift_item_id: uuid.UUID,
        person_name: str,
        quantity: int,
    ) -> Reservation:
        with self._api_call("save reservation"):
            existing = self._find_reservation(user_id, gift_item_id)
            if existing:
                changes = {
                    "quantity": quantity,
                    "person_name": person_name,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                }
                resp = (
                    self._table(RESERVATIONS_TABLE)
                    .update(changes)
                    .eq("id", existing["id"])
                    .execute()
                )
                return Reservation.model_validate(resp.data[0] if resp.data else {**existing, **changes})

            reservation = Reservation(
                user_id=user_id,
                gift_item_id=gift_item_id,
                person_name=person_name,
                quantity=quantity,
            )
            resp = (
                self._table(RESERVATIONS_TABLE)
                .insert(reservation.model_dump(mode="json"))
                .execute()
            )
        return Reservation.model_validate(resp.data[0]) if resp.data else reservation

    def unreserve(self, user_id: uuid.UUID, gift_item_id: uuid.UUID) -> bool:
        with self._api_call("remove reservation"):
            existing = self._find_reservation(user_id, gift_item_id)
            if existing is None:
                logger.warning(
                    "No reservation to remove for user %s and gift item %s",
                    user_id,
                    gift_item_id,
                )
                return False
            self._table(RESERVATIONS_TABLE).delete().eq("id", existing["id"]).execute()
        return True
