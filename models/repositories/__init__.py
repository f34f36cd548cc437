"""
Repositories - Data access layer for database operations.
"""

from models.repositories.people_repository import PeopleRepository

__all__ = ["PeopleRepository"]
