"""
Base class for people table clients.

Every backend exposes the same three operations so the controller can
work against the hosted REST API, a direct database connection or a
test double without knowing which one it has.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class QueryResult:
    """Result of a single table operation."""
    success: bool
    rows: list[dict[str, Any]] = field(default_factory=list)
    count: Optional[int] = None  # rows affected (delete) or returned (select)
    error: Optional[str] = None
    details: Optional[str] = None  # structured detail from the service, if any


class PeopleTable(ABC):
    """Abstract client for the people table."""

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Return a short backend label for logs (e.g., 'supabase')."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the connection settings are present."""
        pass

    @abstractmethod
    def select_all(self) -> QueryResult:
        """
        Fetch every row, newest first.

        Returns:
            QueryResult whose rows are ordered by created_at descending
        """
        pass

    @abstractmethod
    def insert(self, name: str, favorite_color: str) -> QueryResult:
        """
        Insert one row. The server assigns id and created_at.

        Args:
            name: Display name
            favorite_color: CSS color value

        Returns:
            QueryResult with the inserted row when the backend returns it
        """
        pass

    @abstractmethod
    def delete_by_id(self, person_id: int) -> QueryResult:
        """
        Delete the row with exactly this id.

        Returns:
            QueryResult whose count is the number of rows removed (0 or 1)
        """
        pass
