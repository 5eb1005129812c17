# app/stores/__init__.py
from fastapi import Depends
from sqlmodel import Session

from app.core.config import get_settings
from app.core.supabase_client import registry_client
from app.database import get_session
from app.stores.base import GiftListing, GiftSeed, RegistryStore
from app.stores.sql_store import SqlRegistryStore
from app.stores.supabase_store import SupabaseRegistryStore

__all__ = [
    "GiftListing",
    "GiftSeed",
    "RegistryStore",
    "SqlRegistryStore",
    "SupabaseRegistryStore",
    "build_store",
    "get_store",
]


def build_store(session: Session) -> RegistryStore:
    """Pick the store implementation configured by STORE_BACKEND."""
    if get_settings().STORE_BACKEND == "supabase":
        return SupabaseRegistryStore(registry_client())
    return SqlRegistryStore(session)


def get_store(session: Session = Depends(get_session)) -> RegistryStore:
    """
    FastAPI dependency that yields the configured RegistryStore.

    Usage:

        @router.get("/example")
        def example_endpoint(store: RegistryStore = Depends(get_store)):
            ...
    """
    return build_store(session)
