# app/services/gift_service.py
import logging
import uuid

from fastapi import HTTPException, status

from app.models.gift_item import GiftItem
from app.models.user import User
from app.schemas.gift import GiftItemRead, ReservationRead, ReservationRequest
from app.services.reconciler import clamp_quantity, tally
from app.stores import GiftListing, RegistryStore

logger = logging.getLogger(__name__)


class GiftListService:
    """
    Business logic for the guests' gift list.

    Responsibilities:
      - join every gift with its reservations and the requesting user's tally
      - search / "still open" filtering over the fetched list
      - reservation policy (clamping against what other guests promised)
      - return the freshly re-fetched list after every mutation
    """

    def __init__(self, clamp_reservations: bool = True):
        self.clamp_reservations = clamp_reservations

    # ---- internal helpers ----

    @staticmethod
    def _to_read(listing: GiftListing, user: User) -> GiftItemRead:
        item = listing.item
        t = tally(item.suggested_quantity, listing.reservations, user.id)
        return GiftItemRead(
            id=item.id,
            position=item.position,
            name=item.name,
            emoji=item.emoji,
            suggested_quantity=item.suggested_quantity,
            created_at=item.created_at,
            reservations=[
                ReservationRead(
                    id=r.id,
                    user_id=r.user_id,
                    person_name=r.person_name,
                    quantity=r.quantity,
                )
                for r in listing.reservations
            ],
            promised_quantity=t.promised,
            remaining_quantity=t.remaining,
            is_complete=t.is_complete,
            max_allowed_quantity=t.max_allowed,
            my_quantity=t.own_quantity,
        )

    @staticmethod
    def _get_item(store: RegistryStore, gift_item_id: uuid.UUID) -> GiftItem:
        item = store.get_gift_item(gift_item_id)
        if item is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Gift not found",
            )
        return item

    @staticmethod
    def _get_listing(store: RegistryStore, gift_item_id: uuid.UUID) -> GiftListing:
        """The gift with its current reservations; needed for the tally."""
        for listing in store.list_gift_items_with_reservations():
            if listing.item.id == gift_item_id:
                return listing
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Gift not found",
        )

    # ---- public operations ----

    def list_gifts(
        self,
        store: RegistryStore,
        user: User,
        search: str | None = None,
        only_open: bool = False,
    ) -> list[GiftItemRead]:
        """
        Every gift ordered by position, with tallies for `user`.

        Filters:
          - search: case-insensitive substring of the gift name
          - only_open: drop complete gifts unless the user reserved them
        """
        gifts = [self._to_read(listing, user) for listing in store.list_gift_items_with_reservations()]

        needle = (search or "").strip().lower()
        if needle:
            gifts = [g for g in gifts if needle in g.name.lower()]
        if only_open:
            gifts = [g for g in gifts if not g.is_complete or g.my_quantity > 0]
        return gifts

    def reserve(
        self,
        store: RegistryStore,
        user: User,
        gift_item_id: uuid.UUID,
        payload: ReservationRequest,
    ) -> list[GiftItemRead]:
        """
        Create or change the user's reservation for one gift.

        Rules (when clamping is on):
          - a user without a reservation cannot reserve a gift other
            guests already fully covered (409)
          - the quantity is clamped to [1, max(1, max_allowed)]
          - editing an existing reservation down is always allowed
        """
        listing = self._get_listing(store, gift_item_id)
        quantity = payload.quantity

        if self.clamp_reservations:
            t = tally(listing.item.suggested_quantity, listing.reservations, user.id)
            if t.max_allowed <= 0 and t.own_quantity == 0:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail="This gift is already fully covered",
                )
            quantity = clamp_quantity(quantity, t.max_allowed)

        store.reserve(user.id, gift_item_id, user.name, quantity)
        logger.info(
            "User %r reserved %d x %r", user.name, quantity, listing.item.name
        )
        return self.list_gifts(store, user)

    def unreserve(
        self,
        store: RegistryStore,
        user: User,
        gift_item_id: uuid.UUID,
    ) -> list[GiftItemRead]:
        """
        Remove the user's reservation for one gift (no-op if absent).
        """
        item = self._get_item(store, gift_item_id)
        if store.unreserve(user.id, gift_item_id):
            logger.info("User %r removed reservation for %r", user.name, item.name)
        return self.list_gifts(store, user)
