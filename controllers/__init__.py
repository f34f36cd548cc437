"""
Controllers layer - orchestration and session state management.
"""

from controllers.people_controller import PeopleController, Notice

__all__ = ["PeopleController", "Notice"]
