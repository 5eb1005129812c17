# app/services/host_service.py
import csv
import io
import logging
import uuid

from app.models.gift_item import GiftItem
from app.schemas.gift import GiftItemCreate
from app.schemas.host import GuestReservationLine, GuestSummary, HostStats, HostSummary
from app.services.reconciler import is_complete
from app.stores import RegistryStore

logger = logging.getLogger(__name__)

CSV_HEADER = ["guest", "gift", "emoji", "quantity", "suggested_quantity", "guest_total_items"]


class HostService:
    """
    Orchestrates the host ("mother") page: who brings what, and new gifts.
    """

    def summary(self, store: RegistryStore) -> HostSummary:
        """
        One row per registered guest, sorted by name.

        Guests that have not reserved anything are included with an
        empty reservation list.
        """
        listings = store.list_gift_items_with_reservations()
        users = store.list_users()

        guests: dict[uuid.UUID, GuestSummary] = {
            u.id: GuestSummary(user_id=u.id, name=u.name, reservations=[], total_items=0)
            for u in users
        }

        for listing in listings:
            item = listing.item
            for res in listing.reservations:
                guest = guests.get(res.user_id)
                if guest is None:
                    # Reservation from a user row we could not load
                    guest = GuestSummary(
                        user_id=res.user_id, name=res.person_name, reservations=[], total_items=0
                    )
                    guests[res.user_id] = guest
                guest.reservations.append(
                    GuestReservationLine(
                        gift_item_id=item.id,
                        item_name=item.name,
                        item_emoji=item.emoji,
                        quantity=res.quantity,
                        suggested_quantity=item.suggested_quantity,
                    )
                )
                guest.total_items += res.quantity

        rows = sorted(guests.values(), key=lambda g: g.name)
        with_reservations = sum(1 for g in rows if g.reservations)

        total_gifts = len(listings)
        reserved_gifts = sum(1 for listing in listings if listing.reservations)
        stats = HostStats(
            total_guests=len(rows),
            guests_with_reservations=with_reservations,
            guests_without_reservations=len(rows) - with_reservations,
            total_reservations=sum(len(g.reservations) for g in rows),
            total_items=sum(g.total_items for g in rows),
            total_gifts=total_gifts,
            reserved_gifts=reserved_gifts,
            complete_gifts=sum(
                1 for listing in listings
                if is_complete(listing.item.suggested_quantity, listing.reservations)
            ),
            coverage_percent=round(reserved_gifts / total_gifts * 100) if total_gifts else 0,
        )
        return HostSummary(guests=rows, stats=stats)

    def summary_csv(self, store: RegistryStore) -> str:
        """
        The per-guest table as CSV, one line per reservation.

        Guests without reservations get a single line with empty gift columns.
        """
        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(CSV_HEADER)
        for guest in self.summary(store).guests:
            if not guest.reservations:
                writer.writerow([guest.name, "", "", 0, "", 0])
                continue
            for line in guest.reservations:
                writer.writerow(
                    [
                        guest.name,
                        line.item_name,
                        line.item_emoji,
                        line.quantity,
                        line.suggested_quantity,
                        guest.total_items,
                    ]
                )
        return buf.getvalue()

    def add_gift(self, store: RegistryStore, payload: GiftItemCreate) -> GiftItem:
        item = store.add_gift_item(
            name=payload.name,
            emoji=payload.emoji,
            suggested_quantity=payload.suggested_quantity,
        )
        logger.info("Host added gift %r (suggested %d)", item.name, item.suggested_quantity)
        return item
