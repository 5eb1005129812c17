# app/routers/gifts.py
import uuid

from fastapi import APIRouter, Depends, status

from app.core.auth import require_auth, require_host
from app.core.config import get_settings
from app.models.user import User
from app.schemas.gift import GiftItemCreate, GiftItemRead, GiftItemSummary, ReservationRequest
from app.services.gift_service import GiftListService
from app.services.host_service import HostService
from app.stores import RegistryStore, get_store

router = APIRouter(prefix="/gifts", tags=["Gifts"])

service = GiftListService(clamp_reservations=get_settings().CLAMP_RESERVATIONS)
host_service = HostService()


@router.get("", response_model=list[GiftItemRead])
def list_gifts(
    q: str | None = None,
    only_open: bool = False,
    store: RegistryStore = Depends(get_store),
    current_user: User = Depends(require_auth),
):
    """
    List every gift with its reservations and the caller's tally.

    Query params (optional):
      - q: case-insensitive search on the gift name
      - only_open: hide complete gifts the caller has not reserved
    """
    return service.list_gifts(store, current_user, search=q, only_open=only_open)


@router.post(
    "",
    response_model=GiftItemSummary,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_host)],
)
def add_gift(
    payload: GiftItemCreate,
    store: RegistryStore = Depends(get_store),
):
    """
    Add a gift to the end of the list (host only).
    """
    return host_service.add_gift(store, payload)


@router.put("/{gift_item_id}/reservation", response_model=list[GiftItemRead])
def reserve_gift(
    gift_item_id: uuid.UUID,
    payload: ReservationRequest,
    store: RegistryStore = Depends(get_store),
    current_user: User = Depends(require_auth),
):
    """
    Reserve a gift, or change the quantity of the caller's reservation.

    Returns the re-fetched gift list.
    """
    return service.reserve(store, current_user, gift_item_id, payload)


@router.delete("/{gift_item_id}/reservation", response_model=list[GiftItemRead])
def unreserve_gift(
    gift_item_id: uuid.UUID,
    store: RegistryStore = Depends(get_store),
    current_user: User = Depends(require_auth),
):
    """
    Remove the caller's reservation for a gift (no-op if there is none).

    Returns the re-fetched gift list.
    """
    return service.unreserve(store, current_user, gift_item_id)
