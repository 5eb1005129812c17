# app/routers/users.py
from fastapi import APIRouter, Depends

from app.core.auth import require_auth, require_host
from app.models.user import User
from app.schemas.user import UserRead
from app.stores import RegistryStore, get_store

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(require_auth)):
    """
    Return the logged-in user's profile.
    """
    return current_user


@router.get(
    "",
    response_model=list[UserRead],
    dependencies=[Depends(require_host)],
)
def list_users(store: RegistryStore = Depends(get_store)):
    """
    List every registered guest (host only).
    """
    return store.list_users()
