# app/routers/session.py
from fastapi import APIRouter, Depends

from app.core.config import get_settings
from app.schemas.user import LoginRequest, SessionRead
from app.services.session_service import SessionService
from app.stores import RegistryStore, get_store

router = APIRouter(prefix="/session", tags=["Session"])

service = SessionService(get_settings().host_names)


@router.post("", response_model=SessionRead)
def login(
    payload: LoginRequest,
    store: RegistryStore = Depends(get_store),
):
    """
    Log in with a display name.

    The name is stripped and lower-cased; the first login for a name
    creates the user. Returns a bearer token for the other endpoints.
    """
    return service.login(store, payload)
