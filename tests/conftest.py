"""Shared fixtures: project root on sys.path, an in-memory fake table and SQLite."""

import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from config.database import Base, get_session_factory  # noqa: E402
from config.settings import get_settings  # noqa: E402
from services.people_table import PeopleTable, QueryResult, SqlPeopleTable, get_people_table  # noqa: E402


class FakePeopleTable(PeopleTable):
    """In-memory table that assigns ids and increasing timestamps like the server."""

    def __init__(self):
        self.rows: list[dict] = []
        self.calls: list[str] = []
        self.fail: set[str] = set()
        self._next_id = 1
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    @property
    def backend_name(self) -> str:
        return "fake"

    def is_configured(self) -> bool:
        return True

    def select_all(self) -> QueryResult:
        self.calls.append("select")
        if "select" in self.fail:
            return QueryResult(success=False, error="select failed", details="boom")
        rows = sorted(self.rows, key=lambda r: (r["created_at"], r["id"]), reverse=True)
        return QueryResult(success=True, rows=[dict(r) for r in rows], count=len(rows))

    def insert(self, name: str, favorite_color: str) -> QueryResult:
        self.calls.append("insert")
        if "insert" in self.fail:
            return QueryResult(success=False, error="insert failed", details="null value in column")
        self._clock += timedelta(seconds=1)
        row = {
            "id": self._next_id,
            "name": name,
            "favorite_color": favorite_color,
            "created_at": self._clock.isoformat(),
        }
        self._next_id += 1
        self.rows.append(row)
        return QueryResult(success=True, rows=[dict(row)], count=1)

    def delete_by_id(self, person_id: int) -> QueryResult:
        self.calls.append("delete")
        if "delete" in self.fail:
            return QueryResult(success=False, error="delete failed")
        before = len(self.rows)
        self.rows = [r for r in self.rows if r["id"] != person_id]
        return QueryResult(success=True, count=before - len(self.rows))


@pytest.fixture
def fake_table():
    return FakePeopleTable()


@pytest.fixture
def sqlite_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield get_session_factory(engine)
    finally:
        engine.dispose()


@pytest.fixture
def sql_table(sqlite_session_factory):
    return SqlPeopleTable(sqlite_session_factory)


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    get_settings.cache_clear()
    get_people_table.cache_clear()
    yield
    get_settings.cache_clear()
    get_people_table.cache_clear()
