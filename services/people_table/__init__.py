"""
People table clients.

Currently supported backends:
- Supabase REST API (PostgREST), the default
- Direct SQL connection through SQLAlchemy
"""

from functools import lru_cache

from config.settings import get_settings
from services.people_table.base import PeopleTable, QueryResult
from services.people_table.supabase import SupabaseRestTable
from services.people_table.sql import SqlPeopleTable

__all__ = [
    "PeopleTable",
    "QueryResult",
    "SupabaseRestTable",
    "SqlPeopleTable",
    "get_people_table",
]


@lru_cache
def get_people_table() -> PeopleTable:
    """Process-wide table client chosen by the DATA_BACKEND setting."""
    settings = get_settings()
    backend = settings.data_backend.strip().lower()

    if backend == "sql":
        from config.database import get_session_factory
        return SqlPeopleTable(get_session_factory())
    if backend == "rest":
        return SupabaseRestTable()
    raise ValueError(f"Unknown DATA_BACKEND '{settings.data_backend}' (expected 'rest' or 'sql')")
