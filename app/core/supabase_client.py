# app/core/supabase_client.py
from functools import lru_cache
from supabase import create_client, Client

from app.core.config import get_settings

settings = get_settings()


@lru_cache
def supabase_public() -> Client:
    """
    Create a Supabase client with the anon/public key.

    Note: This client still respects RLS, so the gift list tables need
    policies that allow anonymous select/insert/update/delete.

    Raises:
        RuntimeError: if SUPABASE_URL or SUPABASE_KEY is not set.
    """
    if not (settings.SUPABASE_URL and settings.SUPABASE_KEY):
        raise RuntimeError("Missing SUPABASE_URL / SUPABASE_KEY in .env")
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


@lru_cache
def supabase_admin() -> Client:
    """
    Create a Supabase client with the service role key.

    WARNING:
      - Never expose service role key to frontend.
      - Only backend should call this.

    Raises:
        RuntimeError: if SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is not set.
    """
    if not (settings.SUPABASE_URL and settings.SUPABASE_SERVICE_ROLE_KEY):
        raise RuntimeError("Missing SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY in .env")
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)


def registry_client() -> Client:
    """
    Client used by the supabase registry store.

    Prefers the service role key (bypasses RLS); falls back to the anon key.
    """
    if settings.SUPABASE_SERVICE_ROLE_KEY:
        return supabase_admin()
    return supabase_public()
