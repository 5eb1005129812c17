# app/core/auth.py
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from app.core.config import get_settings
from app.models.user import User
from app.stores import RegistryStore, get_store

settings = get_settings()

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately,
#   require_auth turns it into a 401 with our own message.
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user: User) -> str:
    """
    Issue a session token for a logged-in user.

    Claims:
      - sub: user id
      - name, role: informational, the DB row stays authoritative
      - exp: now + SESSION_TTL_MINUTES
    """
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.SESSION_TTL_MINUTES)
    claims = {
        "sub": str(user.id),
        "name": user.name,
        "role": user.role,
        "exp": expires,
    }
    return jwt.encode(claims, settings.SESSION_SECRET, algorithm=settings.SESSION_ALG)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a session token.

    Verification:
      - signature (SESSION_ALG using SESSION_SECRET)
      - expiration time (exp)

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.SESSION_SECRET,
            algorithms=[settings.SESSION_ALG],
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    store: RegistryStore = Depends(get_store),
) -> User | None:
    """
    Resolve the current user from a session token.

    Flow:
      1. If no Authorization header => anonymous => return None.
      2. Decode token => extract 'sub'.
      3. Convert 'sub' to UUID and load the user row.

    Raises:
        HTTPException(401): if token is malformed or the user no longer exists.
    """
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    sub = payload.get("sub")
    if not sub:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session missing sub",
        )

    try:
        user_id = uuid.UUID(sub)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid sub in session",
        )

    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown user, please log in again",
        )
    return user


def require_auth(user: User | None = Depends(get_current_user)) -> User:
    """
    Enforce a logged-in guest (any role).

    Raises:
        HTTPException(401): if user is None.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user


def require_host(user: User = Depends(require_auth)) -> User:
    """
    Enforce the host role (the mother's page and the "add gift" form).

    Raises:
        HTTPException(403): if role is not host.
    """
    if user.role != "host":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Host access required",
        )
    return user
