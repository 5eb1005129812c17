# app/services/reconciler.py
"""
Reservation arithmetic for a single gift item.

Everything here is a pure function of the item's suggested quantity and
its current reservation list, so it is re-derived from the freshly
fetched list after every mutation and never cached.
"""
import uuid
from dataclasses import dataclass
from typing import Iterable, Protocol


class HasUserQuantity(Protocol):
    user_id: uuid.UUID
    quantity: int


@dataclass(frozen=True)
class ReservationTally:
    suggested: int
    promised: int
    remaining: int
    is_complete: bool
    # Ceiling for the requesting user; zero or negative when others over-promised
    max_allowed: int
    own_quantity: int


def promised_quantity(reservations: Iterable[HasUserQuantity]) -> int:
    return sum(r.quantity for r in reservations)


def remaining_quantity(suggested: int, reservations: Iterable[HasUserQuantity]) -> int:
    return max(0, suggested - promised_quantity(reservations))


def is_complete(suggested: int, reservations: Iterable[HasUserQuantity]) -> bool:
    return promised_quantity(reservations) >= suggested


def max_allowed_for_user(
    suggested: int,
    reservations: Iterable[HasUserQuantity],
    user_id: uuid.UUID | None,
) -> int:
    """
    Suggested quantity minus what *other* users already promised.

    The user's own reservation is left out, so raising or lowering an
    existing reservation is measured against the same ceiling.
    """
    reserved_by_others = sum(r.quantity for r in reservations if r.user_id != user_id)
    return suggested - reserved_by_others


def clamp_quantity(requested: int, max_allowed: int) -> int:
    """Clamp a requested quantity into [1, max(1, max_allowed)]."""
    upper = max(1, max_allowed)
    return min(max(1, requested), upper)


def tally(
    suggested: int,
    reservations: Iterable[HasUserQuantity],
    user_id: uuid.UUID | None = None,
) -> ReservationTally:
    reservations = list(reservations)
    promised = promised_quantity(reservations)
    own = sum(r.quantity for r in reservations if user_id is not None and r.user_id == user_id)
    return ReservationTally(
        suggested=suggested,
        promised=promised,
        remaining=max(0, suggested - promised),
        is_complete=promised >= suggested,
        max_allowed=max_allowed_for_user(suggested, reservations, user_id),
        own_quantity=own,
    )
