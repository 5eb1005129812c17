import os
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["SESSION_SECRET"] = "test-secret"
os.environ["HOST_NAMES"] = "mamãe"
# Tests seed explicitly when they need the default catalog.
os.environ["SEED_GIFT_ITEMS"] = "false"
os.environ["STORE_BACKEND"] = "sql"

from sqlmodel import SQLModel, Session  # noqa: E402

from app.database import engine  # noqa: E402
from app.main import app  # noqa: E402
from app.stores import SqlRegistryStore  # noqa: E402

API = "/api/v1"


@pytest.fixture(autouse=True)
def setup_db():
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db_session():
    with Session(engine) as session:
        yield session


@pytest.fixture()
def store(db_session):
    return SqlRegistryStore(db_session)


@pytest.fixture()
def login(client):
    """Log a name in and return the Authorization headers for it."""

    def _login(name: str) -> dict[str, str]:
        resp = client.post(f"{API}/session", json={"name": name})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _login


# --- In-memory stand-in for the supabase PostgREST query builder ---


class FakeQuery:
    def __init__(self, table: "FakeTable"):
        self.table = table
        self.op = "select"
        self.payload = None
        self.filters: list[tuple[str, object]] = []
        self._order: tuple[str, bool] | None = None
        self._limit: int | None = None
        self._count: str | None = None

    def select(self, *columns, count=None):
        self.op = "select"
        self._count = count
        return self

    def insert(self, payload):
        self.op = "insert"
        self.payload = payload
        return self

    def update(self, changes):
        self.op = "update"
        self.payload = changes
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def _matches(self, row: dict) -> bool:
        return all(str(row.get(col)) == str(val) for col, val in self.filters)

    def execute(self):
        if self.table.fail_with is not None:
            raise self.table.fail_with

        if self.op == "insert":
            new_rows = self.payload if isinstance(self.payload, list) else [self.payload]
            new_rows = [dict(r) for r in new_rows]
            self.table.rows.extend(new_rows)
            return SimpleNamespace(data=new_rows, count=None)

        matched = [r for r in self.table.rows if self._matches(r)]

        if self.op == "update":
            for row in matched:
                row.update(self.payload)
            return SimpleNamespace(data=[dict(r) for r in matched], count=None)

        if self.op == "delete":
            self.table.rows = [r for r in self.table.rows if not self._matches(r)]
            return SimpleNamespace(data=matched, count=None)

        total = len(matched)
        if self._order is not None:
            column, desc = self._order
            matched = sorted(matched, key=lambda r: r[column], reverse=desc)
        if self._limit is not None:
            matched = matched[: self._limit]
        return SimpleNamespace(
            data=[dict(r) for r in matched],
            count=total if self._count else None,
        )


class FakeTable:
    def __init__(self):
        self.rows: list[dict] = []
        self.fail_with: Exception | None = None


class FakeSupabase:
    def __init__(self):
        self.tables: dict[str, FakeTable] = {}

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self.tables.setdefault(name, FakeTable()))


@pytest.fixture()
def fake_supabase():
    return FakeSupabase()
