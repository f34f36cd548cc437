"""
Views layer - UI presentation components.
"""

from views.people_view import PeopleView

__all__ = ["PeopleView"]
