"""
SQLAlchemy ORM Entity Models

Mirror of the hosted ``thePeople`` table, used by the direct SQL backend.
The schema is owned by the hosted database; these models only describe it.
"""

from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func

from config.database import Base


class PersonEntity(Base):
    """A person and their favorite color."""
    __tablename__ = "thePeople"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    favorite_color = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def to_row(self) -> dict:
        """Convert to the same dict shape the REST API returns."""
        return {
            "id": self.id,
            "name": self.name,
            "favorite_color": self.favorite_color,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
