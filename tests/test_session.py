API = "/api/v1"


def test_login_normalizes_name_and_reuses_user(client):
    first = client.post(f"{API}/session", json={"name": "  Ana Paula "})
    assert first.status_code == 200
    body = first.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["name"] == "ana paula"
    assert body["user"]["role"] == "guest"

    second = client.post(f"{API}/session", json={"name": "ANA PAULA"})
    assert second.status_code == 200
    assert second.json()["user"]["id"] == body["user"]["id"]


def test_login_rejects_blank_name(client):
    resp = client.post(f"{API}/session", json={"name": "   "})
    assert resp.status_code == 422


def test_host_name_gets_host_role(client):
    resp = client.post(f"{API}/session", json={"name": "Mamãe"})
    assert resp.status_code == 200
    assert resp.json()["user"]["role"] == "host"


def test_users_me(client, login):
    headers = login("Beto")

    resp = client.get(f"{API}/users/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["name"] == "beto"


def test_users_me_requires_token(client):
    assert client.get(f"{API}/users/me").status_code == 401

    resp = client.get(f"{API}/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


def test_list_users_is_host_only(client, login):
    guest = login("carla")
    host = login("mamãe")

    assert client.get(f"{API}/users", headers=guest).status_code == 403

    resp = client.get(f"{API}/users", headers=host)
    assert resp.status_code == 200
    assert {u["name"] for u in resp.json()} == {"carla", "mamãe"}
