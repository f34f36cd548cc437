"""
Direct database client for the people table.

Uses a SQLAlchemy session per operation through PeopleRepository. Handy
when the Postgres connection string is available but the REST API is not,
and for running against a local SQLite file during development.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from models.repositories import PeopleRepository
from services.people_table.base import PeopleTable, QueryResult

logger = logging.getLogger(__name__)


class SqlPeopleTable(PeopleTable):
    """SQLAlchemy-backed client for the people table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @property
    def backend_name(self) -> str:
        return "sql"

    def is_configured(self) -> bool:
        return self._session_factory is not None

    def select_all(self) -> QueryResult:
        db = self._session_factory()
        try:
            repo = PeopleRepository(db)
            rows = [person.to_row() for person in repo.get_all()]
            return QueryResult(success=True, rows=rows, count=len(rows))
        except SQLAlchemyError as e:
            return self._failure("select", db, e)
        finally:
            db.close()

    def insert(self, name: str, favorite_color: str) -> QueryResult:
        db = self._session_factory()
        try:
            repo = PeopleRepository(db)
            person = repo.create(name, favorite_color)
            return QueryResult(success=True, rows=[person.to_row()], count=1)
        except SQLAlchemyError as e:
            return self._failure("insert", db, e)
        finally:
            db.close()

    def delete_by_id(self, person_id: int) -> QueryResult:
        db = self._session_factory()
        try:
            repo = PeopleRepository(db)
            removed = repo.delete(person_id)
            return QueryResult(success=True, count=removed)
        except SQLAlchemyError as e:
            return self._failure("delete", db, e)
        finally:
            db.close()

    def _failure(self, operation: str, db, error: SQLAlchemyError) -> QueryResult:
        """Roll back and turn a database error into a failed result."""
        db.rollback()
        orig = getattr(error, "orig", None)
        details = str(orig) if orig is not None else None
        logger.debug(f"Database {operation} failed: {error.__class__.__name__} - {details or error}")
        return QueryResult(
            success=False,
            error=f"Database {operation} failed ({error.__class__.__name__})",
            details=details,
        )
