import importlib

import pytest

MODULES = [
    "app.main",
    "app.database",
    "app.core.auth",
    "app.core.config",
    "app.core.exceptions",
    "app.core.supabase_client",
    "app.models.user",
    "app.models.gift_item",
    "app.models.reservation",
    "app.repositories.user_repo",
    "app.repositories.gift_item_repo",
    "app.repositories.reservation_repo",
    "app.routers.session",
    "app.routers.users",
    "app.routers.gifts",
    "app.routers.host",
    "app.schemas.user",
    "app.schemas.gift",
    "app.schemas.host",
    "app.services.reconciler",
    "app.services.gift_service",
    "app.services.host_service",
    "app.services.seed_service",
    "app.services.session_service",
    "app.stores",
    "app.stores.base",
    "app.stores.sql_store",
    "app.stores.supabase_store",
]


@pytest.mark.parametrize("name", MODULES)
def test_module_imports(name):
    module = importlib.import_module(name)
    assert module.__name__ == name
