"""
Person - Pydantic model for rows of the people table.

Rows cross the service boundary as plain dicts (PostgREST JSON or
converted ORM entities) and are validated into this model before they
reach the controller.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Person(BaseModel):
    """One person entry."""
    id: Optional[int] = Field(default=None, description="Server-assigned identifier")
    name: str
    favorite_color: str = Field(description="Any CSS color value, e.g. 'blue' or '#3366ff'")
    created_at: Optional[datetime] = Field(default=None, description="Server-assigned creation time")
