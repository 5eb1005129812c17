# app/services/session_service.py
import logging

from app.core.auth import create_access_token
from app.schemas.user import LoginRequest, SessionRead, UserRead
from app.stores import RegistryStore

logger = logging.getLogger(__name__)


class SessionService:
    """
    Login by display name.

    Responsibilities:
      - lookup-or-create the user for a normalized name
      - grant the host role to names listed in HOST_NAMES (first login only)
      - issue the session token
    """

    def __init__(self, host_names: set[str]):
        self.host_names = host_names

    def login(self, store: RegistryStore, payload: LoginRequest) -> SessionRead:
        role = "host" if payload.name in self.host_names else "guest"
        user = store.get_or_create_user(payload.name, role=role)
        logger.info("User %r logged in (%s)", user.name, user.role)
        return SessionRead(
            access_token=create_access_token(user),
            user=UserRead.model_validate(user),
        )
