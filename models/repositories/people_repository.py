"""
People Repository - Data access for the people table.

This repository handles the three database operations the app needs:
list everything newest first, insert one person, delete one person by id.
"""

from sqlalchemy.orm import Session

from models.entities import PersonEntity


class PeopleRepository:
    """Repository for people database operations."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def get_all(self) -> list[PersonEntity]:
        """Get every person, newest first (ties broken by id)."""
        return self.db.query(PersonEntity).order_by(
            PersonEntity.created_at.desc(),
            PersonEntity.id.desc()
        ).all()

    def create(self, name: str, favorite_color: str) -> PersonEntity:
        """
        Insert a new person.

        Args:
            name: Display name, already trimmed
            favorite_color: CSS color value, already trimmed
        """
        person = PersonEntity(name=name, favorite_color=favorite_color)
        self.db.add(person)
        self.db.commit()
        self.db.refresh(person)
        return person

    def delete(self, person_id: int) -> int:
        """Delete a person by id. Returns the number of rows removed (0 or 1)."""
        result = self.db.query(PersonEntity).filter(
            PersonEntity.id == person_id
        ).delete()
        self.db.commit()
        return result
