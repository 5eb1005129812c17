import csv
import io
import uuid

from app.services.host_service import HostService
from app.stores import SupabaseRegistryStore

API = "/api/v1"


def _setup_party(client, login, store):
    fralda = store.add_gift_item("Fralda P", "👶", 5).id
    manta = store.add_gift_item("Manta de bebê", "🧸", 2).id
    store.add_gift_item("Shampoo infantil", "🧴", 3)

    beto = login("beto")
    ana = login("ana")
    login("carla")
    host = login("mamãe")

    client.put(f"{API}/gifts/{fralda}/reservation", headers=ana, json={"quantity": 3})
    client.put(f"{API}/gifts/{manta}/reservation", headers=ana, json={"quantity": 2})
    client.put(f"{API}/gifts/{fralda}/reservation", headers=beto, json={"quantity": 1})
    return host


def test_summary_groups_reservations_per_guest(client, login, store):
    host = _setup_party(client, login, store)

    resp = client.get(f"{API}/host/summary", headers=host)
    assert resp.status_code == 200
    body = resp.json()

    guests = body["guests"]
    assert [g["name"] for g in guests] == ["ana", "beto", "carla", "mamãe"]

    ana = guests[0]
    assert ana["total_items"] == 5
    assert [(r["item_name"], r["quantity"], r["suggested_quantity"]) for r in ana["reservations"]] == [
        ("Fralda P", 3, 5),
        ("Manta de bebê", 2, 2),
    ]
    assert guests[2]["reservations"] == []
    assert guests[2]["total_items"] == 0

    stats = body["stats"]
    assert stats == {
        "total_guests": 4,
        "guests_with_reservations": 2,
        "guests_without_reservations": 2,
        "total_reservations": 3,
        "total_items": 6,
        "total_gifts": 3,
        "reserved_gifts": 2,
        "complete_gifts": 1,
        "coverage_percent": 67,
    }


def test_summary_on_empty_catalog(client, login):
    host = login("mamãe")

    stats = client.get(f"{API}/host/summary", headers=host).json()["stats"]
    assert stats["total_gifts"] == 0
    assert stats["coverage_percent"] == 0
    assert stats["total_guests"] == 1


def test_summary_csv(client, login, store):
    host = _setup_party(client, login, store)

    resp = client.get(f"{API}/host/summary.csv", headers=host)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "attachment" in resp.headers["content-disposition"]

    rows = list(csv.reader(io.StringIO(resp.text)))
    assert rows[0] == ["guest", "gift", "emoji", "quantity", "suggested_quantity", "guest_total_items"]
    assert rows[1] == ["ana", "Fralda P", "👶", "3", "5", "5"]
    assert ["carla", "", "", "0", "", "0"] in rows


def test_host_routes_reject_guests(client, login):
    ana = login("ana")

    assert client.get(f"{API}/host/summary", headers=ana).status_code == 403
    assert client.get(f"{API}/host/summary.csv", headers=ana).status_code == 403
    assert client.get(f"{API}/host/summary").status_code == 401


def test_summary_counts_guests_from_the_table(fake_supabase):
    store = SupabaseRegistryStore(fake_supabase)
    item = store.add_gift_item("Fralda P", "👶", 5)
    ana = store.get_or_create_user("ana")
    store.reserve(ana.id, item.id, "ana", 1)
    # Reservation whose user row is gone
    store.reserve(uuid.uuid4(), item.id, "zeca", 2)

    summary = HostService().summary(store)

    assert [g.name for g in summary.guests] == ["ana", "zeca"]
    assert summary.stats.total_guests == len(summary.guests) == 2
    assert summary.stats.guests_with_reservations == 2
    assert summary.stats.guests_without_reservations == 0
    assert summary.stats.total_items == 3
