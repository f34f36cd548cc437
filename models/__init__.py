"""
Models layer - row models and ORM entities.
"""

from models.person import Person
from models.entities import PersonEntity

__all__ = ["Person", "PersonEntity"]
