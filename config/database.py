"""
Database setup for the direct SQL backend.

The hosted table normally sits behind the Supabase REST API. When a
``DATABASE_URL`` is configured the same Postgres table can be reached
directly through SQLAlchemy instead.
"""

from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import get_settings

Base = declarative_base()


@lru_cache
def get_engine() -> Engine:
    """Cached engine built from settings."""
    settings = get_settings()
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL is not configured")
    return create_engine(settings.database_url, pool_pre_ping=True)


def get_session_factory(engine: Optional[Engine] = None) -> sessionmaker:
    """Session factory bound to the given engine (or the configured one)."""
    return sessionmaker(
        bind=engine or get_engine(),
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
