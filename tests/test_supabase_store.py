import uuid

import httpx
import pytest

from app.core.exceptions import StoreError
from app.stores import SupabaseRegistryStore


@pytest.fixture()
def sb_store(fake_supabase):
    return SupabaseRegistryStore(fake_supabase)


def test_get_or_create_user(sb_store, fake_supabase):
    ana = sb_store.get_or_create_user("ana")
    again = sb_store.get_or_create_user("ana")

    assert again.id == ana.id
    assert isinstance(ana.id, uuid.UUID)
    assert len(fake_supabase.tables["users"].rows) == 1
    assert sb_store.get_user(ana.id).name == "ana"
    assert sb_store.get_user(uuid.uuid4()) is None


def test_gift_items_are_listed_by_position(sb_store):
    sb_store.add_gift_item("B", "🎁", 1)
    sb_store.add_gift_item("C", "🎁", 2)

    listings = sb_store.list_gift_items_with_reservations()
    assert [(g.item.name, g.item.position) for g in listings] == [("B", 1), ("C", 2)]
    assert sb_store.count_gift_items() == 2


def test_reserve_twice_keeps_one_row(sb_store, fake_supabase):
    user = sb_store.get_or_create_user("ana")
    item = sb_store.add_gift_item("Fralda P", "👶", 5)

    sb_store.reserve(user.id, item.id, "ana", 2)
    updated = sb_store.reserve(user.id, item.id, "ana", 4)

    assert updated.quantity == 4
    assert len(fake_supabase.tables["reservations"].rows) == 1
    [listing] = sb_store.list_gift_items_with_reservations()
    assert [r.quantity for r in listing.reservations] == [4]


def test_unreserve_missing_is_noop(sb_store, fake_supabase):
    user = sb_store.get_or_create_user("ana")
    item = sb_store.add_gift_item("Fralda P", "👶", 5)

    assert sb_store.unreserve(user.id, item.id) is False

    sb_store.reserve(user.id, item.id, "ana", 1)
    assert sb_store.unreserve(user.id, item.id) is True
    assert fake_supabase.tables["reservations"].rows == []


def test_seed_inserts_positions(sb_store):
    from app.services.seed_service import INITIAL_GIFT_ITEMS, seed_gift_items

    assert seed_gift_items(sb_store) is True
    listings = sb_store.list_gift_items_with_reservations()
    assert [g.item.position for g in listings] == list(range(1, len(INITIAL_GIFT_ITEMS) + 1))
    assert seed_gift_items(sb_store) is False


def test_network_errors_become_store_errors(sb_store, fake_supabase):
    fake_supabase.table("gift_items")
    fake_supabase.tables["gift_items"].fail_with = httpx.ConnectError("connection refused")

    with pytest.raises(StoreError):
        sb_store.list_gift_items_with_reservations()
