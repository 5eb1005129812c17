# app/stores/sql_store.py
import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.exceptions import StoreError
from app.models.gift_item import GiftItem
from app.models.reservation import Reservation
from app.models.user import User
from app.repositories.gift_item_repo import GiftItemRepository
from app.repositories.reservation_repo import ReservationRepository
from app.repositories.user_repo import UserRepository
from app.stores.base import GiftListing, GiftSeed, group_reservations

logger = logging.getLogger(__name__)


class SqlRegistryStore:
    """
    RegistryStore over SQLModel repositories.

    Works against Supabase Postgres (through the pooler) or SQLite.
    One instance wraps one request-scoped Session.
    """

    def __init__(
        self,
        session: Session,
        user_repo: UserRepository | None = None,
        gift_item_repo: GiftItemRepository | None = None,
        reservation_repo: ReservationRepository | None = None,
    ):
        self.session = session
        self.user_repo = user_repo or UserRepository()
        self.gift_item_repo = gift_item_repo or GiftItemRepository()
        self.reservation_repo = reservation_repo or ReservationRepository()

    @contextmanager
    def _db_call(self, action: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Database error while trying to %s", action)
            raise StoreError() from exc

    # ----- Users -----

    def get_user(self, user_id: uuid.UUID) -> User | None:
        with self._db_call("load user"):
            return self.user_repo.get_by_id(self.session, user_id)

    def list_users(self) -> list[User]:
        with self._db_call("list users"):
            return self.user_repo.list_oldest_first(self.session)

    def get_or_create_user(self, name: str, role: str = "guest") -> User:
        with self._db_call("log in"):
            user = self.user_repo.get_by_name(self.session, name)
            if user is not None:
                return user
            logger.info("Creating user %r with role %s", name, role)
            return self.user_repo.create(self.session, User(name=name, role=role))

    # ----- Gift items -----

    def get_gift_item(self, gift_item_id: uuid.UUID) -> GiftItem | None:
        with self._db_call("load gift item"):
            return self.gift_item_repo.get_by_id(self.session, gift_item_id)

    def list_gift_items_with_reservations(self) -> list[GiftListing]:
        with self._db_call("load the gift list"):
            items = self.gift_item_repo.list_ordered(self.session)
            reservations = self.reservation_repo.list_all(self.session)
        return group_reservations(items, reservations)

    def add_gift_item(self, name: str, emoji: str, suggested_quantity: int) -> GiftItem:
        with self._db_call("add gift item"):
            position = self.gift_item_repo.max_position(self.session) + 1
            item = GiftItem(
                position=position,
                name=name,
                emoji=emoji,
                suggested_quantity=suggested_quantity,
            )
            return self.gift_item_repo.create(self.session, item)

    def count_gift_items(self) -> int:
        with self._db_call("count gift items"):
            return self.gift_item_repo.count(self.session)

    def seed_gift_items(self, seeds: list[GiftSeed]) -> None:
        items = [
            GiftItem(
                position=i,
                name=seed.name,
                emoji=seed.emoji,
                suggested_quantity=seed.suggested_quantity,
            )
            for i, seed in enumerate(seeds, start=1)
        ]
        with self._db_call("seed gift items"):
            self.gift_item_repo.create_many(self.session, items)

    # ----- Reservations -----

    def reserve(
        self,
        user_id: uuid.UUID,
        gift_item_id: uuid.UUID,
        person_name: str,
        quantity: int,
    ) -> Reservation:
        with self._db_call("save reservation"):
            existing = self.reservation_repo.get_for_user_and_item(
                self.session, user_id, gift_item_id
            )
            if existing:
                existing.quantity = quantity
                existing.person_name = person_name
                existing.updated_at = datetime.now(timezone.utc)
                return self.reservation_repo.update(self.session, existing)

            reservation = Reservation(
                user_id=user_id,
                gift_item_id=gift_item_id,
                person_name=person_name,
                quantity=quantity,
            )
            return self.reservation_repo.create(self.session, reservation)

    def unreserve(self, user_id: uuid.UUID, gift_item_id: uuid.UUID) -> bool:
        """Delete the (user, item) reservation. Returns False if there was none."""
        with self._db_call("remove reservation"):
            existing = self.reservation_repo.get_for_user_and_item(
                self.session, user_id, gift_item_id
            )
            if existing is None:
                logger.warning(
                    "No reservation to remove for user %s and gift item %s",
                    user_id,
                    gift_item_id,
                )
                return False
            self.reservation_repo.delete(self.session, existing)
            return True
