import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from mandram.config import settings
from mandram.database.supabase_client import SupabaseClient, get_supabase
from mandram.main import app
from mandram.modules.keepalive.routes import get_keepalive_service
from mandram.modules.keepalive.service import KeepaliveService
from mandram.modules.registrations.routes import get_registration_service
from mandram.modules.registrations.service import RegistrationService


class FakeAPIError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FakeResponse:
    def __init__(self, data: Any, count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeQuery:
    """Just enough of the postgrest request builder for the services under test."""

    def __init__(self, store: "FakeSupabase", table: str):
        self.store = store
        self.table_name = table
        self.columns = "*"
        self.count_mode = None
        self.filters = []
        self.orders = []
        self.limit_value = None
        self.single = False
        self.write = None

    def select(self, columns: str = "*", count: Optional[str] = None):
        self.columns = columns
        self.count_mode = count
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        self.store.filter_log.append((self.table_name, "eq", column, value))
        return self

    def lt(self, column, value):
        self.filters.append(lambda row: row.get(column) is not None and row[column] < value)
        self.store.filter_log.append((self.table_name, "lt", column, value))
        return self

    def gte(self, column, value):
        self.filters.append(lambda row: row.get(column) is not None and row[column] >= value)
        self.store.filter_log.append((self.table_name, "gte", column, value))
        return self

    def order(self, column, *, desc: bool = False, nullsfirst: Optional[bool] = None):
        # Postgres default: NULLS LAST ascending, NULLS FIRST descending
        self.orders.append((column, desc, desc if nullsfirst is None else nullsfirst))
        return self

    def limit(self, size: int):
        self.limit_value = size
        return self

    def maybe_single(self):
        self.single = True
        return self

    def insert(self, rows):
        self.write = ("insert", rows)
        return self

    def upsert(self, rows):
        self.write = ("upsert", rows)
        return self

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if self.columns.strip() == "*":
            return dict(row)
        return {c.strip(): row.get(c.strip()) for c in self.columns.split(",")}

    def _run_write(self) -> FakeResponse:
        kind, rows = self.write
        rows = rows if isinstance(rows, list) else [rows]
        table = self.store.tables.setdefault(self.table_name, [])
        written = []
        for row in rows:
            row = dict(row)
            if kind == "upsert":
                table[:] = [r for r in table if r.get("id") != row.get("id")]
            row.setdefault("id", str(uuid.uuid4()))
            row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
            table.append(row)
            written.append(row)
        return FakeResponse(written)

    def execute(self) -> FakeResponse:
        self.store.executed.append(self.table_name)
        if self.table_name in self.store.failing_tables:
            raise FakeAPIError(f'relation "public.{self.table_name}" is unavailable')
        if self.write is not None:
            return self._run_write()

        rows = [r for r in self.store.tables.get(self.table_name, []) if all(f(r) for f in self.filters)]
        for column, desc, nulls_first in reversed(self.orders):
            present = sorted((r for r in rows if r.get(column) is not None), key=lambda r: r[column], reverse=desc)
            missing = [r for r in rows if r.get(column) is None]
            rows = missing + present if nulls_first else present + missing
        total = len(rows)
        if self.limit_value is not None:
            rows = rows[:self.limit_value]
        rows = [self._project(r) for r in rows]
        if self.single:
            return FakeResponse(rows[0] if rows else None)
        return FakeResponse(rows, count=total if self.count_mode else None)


class FakeSupabase:
    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None, failing_tables=()):
        self.tables = {name: [dict(r) for r in rows] for name, rows in (tables or {}).items()}
        self.failing_tables = set(failing_tables)
        self.executed: List[str] = []
        self.filter_log: List[tuple] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def iso(year, month, day, hour=10):
    return datetime(year, month, day, hour, tzinfo=timezone.utc).isoformat()


def event_row(id, title, date, category=None, is_featured=False):
    return {
        "id": id, "title": title, "date": date, "category": category,
        "is_featured": is_featured, "created_at": iso(2026, 1, 1), "updated_at": iso(2026, 1, 1),
    }


def member_row(id, name, role, position_order=None, is_office_bearer=False, is_faculty=False, year=2026):
    return {
        "id": id, "name": name, "role": role, "position_order": position_order,
        "is_office_bearer": is_office_bearer, "is_faculty": is_faculty, "year": year,
    }


def image_row(id, display_order=None, created_at=None, show_in_gallery=True, pongal_images=False, event_id=None):
    return {
        "id": id, "image_url": f"https://img.example.org/{id}.jpg", "display_order": display_order,
        "created_at": created_at or iso(2026, 1, 1), "show_in_gallery": show_in_gallery,
        "pongal_images": pongal_images, "event_id": event_id,
    }


@pytest.fixture
def seeded_tables():
    return {
        "events": [
            event_row("e1", "Thamizh Kavithai Workshop", iso(2026, 11, 2), "Workshop", is_featured=True),
            event_row("e2", "Pattimandram Debate", iso(2026, 12, 5), "Competition"),
            event_row("e3", "Pongal Thiruvizha", iso(2026, 1, 14), "Festival", is_featured=True),
            event_row("e4", "Silambam Showcase", iso(2025, 9, 20), "Cultural"),
            event_row("e5", "Bharathi Vizha", iso(2025, 12, 11), None),
        ],
        "team_members": [
            member_row("t1", "Priya Shankar", "President", 1, is_office_bearer=True),
            member_row("t2", "Karthik Raja", "Vice President", 2, is_office_bearer=True),
            member_row("t3", "Ananya Devi", "Secretary", None, is_office_bearer=True),
            member_row("t4", "Meera K.", "Events Head", 2),
            member_row("t5", "Arjun V.", "Cultural Head", 1),
            member_row("t6", "Dr. Lakshmi S.", "Faculty Coordinator", 1, is_faculty=True),
            member_row("t7", "Surya Prakash", "President", 1, is_office_bearer=True, year=2025),
            member_row("t8", "Deepa R.", "Media Head", 1, year=2025),
        ],
        "gallery_images": [
            image_row("g1", display_order=2),
            image_row("g2", display_order=None, created_at=iso(2026, 3, 1)),
            image_row("g3", display_order=1),
            image_row("g4", display_order=None, created_at=iso(2026, 5, 1)),
            image_row("g5", display_order=1, show_in_gallery=False, pongal_images=True),
            image_row("g6", display_order=None, show_in_gallery=False, pongal_images=True),
        ],
        "achievements": [
            {"id": "a1", "title": "Best Cultural Club", "year": 2024, "category": "Award"},
            {"id": "a2", "title": "Inter-college Debate Winners", "year": 2026, "category": "Competition"},
            {"id": "a3", "title": "Tamil Literary Fest", "year": 2025, "category": "Literary"},
        ],
        "kanaiyazhi_editions": [
            {"id": "k1", "edition_number": 1, "title": "Vidiyal", "year": 2025,
             "cover_image_url": "https://img.example.org/k1.jpg", "pdf_url": "https://files.example.org/k1.pdf"},
            {"id": "k2", "edition_number": 2, "title": "Thendral", "year": 2025, "is_featured": True,
             "cover_image_url": "https://img.example.org/k2.jpg", "pdf_url": "https://files.example.org/k2.pdf"},
            {"id": "k3", "edition_number": 3, "title": "Mazhai", "year": 2026,
             "cover_image_url": "https://img.example.org/k3.jpg", "pdf_url": "https://files.example.org/k3.pdf"},
        ],
    }


@pytest.fixture
def fake_supabase(seeded_tables):
    return FakeSupabase(seeded_tables)


@pytest.fixture
def empty_supabase():
    return FakeSupabase()


@pytest.fixture
def failing_supabase():
    return FakeSupabase(failing_tables={
        "events", "team_members", "gallery_images", "achievements",
        "kanaiyazhi_editions", "registrations", "keepalive",
    })


@pytest.fixture(autouse=True)
def disable_rate_limit():
    original = app.state.limiter.enabled
    app.state.limiter.enabled = False
    try:
        yield
    finally:
        app.state.limiter.enabled = original


@pytest.fixture
def make_client():
    """Build a TestClient whose Supabase dependency is the given fake store."""
    def _make(store):
        app.dependency_overrides[get_supabase] = lambda: store
        app.dependency_overrides[get_keepalive_service] = lambda: KeepaliveService(lambda: store)
        app.dependency_overrides[get_registration_service] = lambda: RegistrationService(lambda: store)
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_supabase(monkeypatch):
    """No Supabase credentials in the environment."""
    monkeypatch.setattr(settings, "supabase_url", "")
    monkeypatch.setattr(settings, "supabase_key", "")
    monkeypatch.setattr(settings, "supabase_service_role_key", None)
    SupabaseClient.reset_client()
    yield
    SupabaseClient.reset_client()


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_store():
    """FakeSupabase factory for tests that need their own rows or failures."""
    return FakeSupabase
