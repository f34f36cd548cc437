"""
People Controller - manages the favorite colors list and form state.

This controller handles:
- Session state for the list snapshot, the two form inputs and the busy flag
- Fetching, adding and deleting people through the injected table client
- Queuing user-facing notices for the view

The list is never patched locally: every successful write is followed by
a full re-fetch so the view always matches the table.
"""

import logging
from collections.abc import MutableMapping
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass
from typing import Any, Callable, ContextManager, Optional

import streamlit as st
from pydantic import ValidationError

from models import Person
from services.people_table import PeopleTable, QueryResult

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please enter both name and color"
INSERT_FAILED_MESSAGE = "Failed to add person. Check the logs for details."

# Progress messages shown while the busy flag is up
LOADING_MESSAGE = "Loading people..."
SAVING_MESSAGE = "Adding person..."
DELETING_MESSAGE = "Deleting person..."


@dataclass
class Notice:
    """A message the view shows once."""
    level: str  # "warning" or "error"
    message: str


class PeopleController:
    """Controller for the people list and the add-person form."""

    def __init__(
        self,
        table: PeopleTable,
        state: Optional[MutableMapping] = None,
        busy_on_delete: bool = False,
        progress: Optional[Callable[[str], ContextManager]] = None,
    ):
        """
        Args:
            table: Client for the people table
            state: Where to keep UI state (defaults to st.session_state)
            busy_on_delete: Whether deletes raise the busy flag too
            progress: Context manager factory entered for as long as the
                busy flag is up (the view passes st.spinner)
        """
        self.table = table
        self.busy_on_delete = busy_on_delete
        self.progress = progress
        self._session = st.session_state if state is None else state
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "people" not in self._session:
            self._session["people"] = {
                "records": [],
                "name_input": "",
                "color_input": "",
                "in_flight": 0,  # fetch/insert calls currently pending
                "fetch_generation": 0,  # token of the latest fetch issued
                "loaded": False,
                "notice": None,
            }

    @property
    def _state(self) -> dict[str, Any]:
        return self._session["people"]

    # ==========================================
    # Session State
    # ==========================================

    @property
    def records(self) -> list[Person]:
        """The current snapshot, newest first."""
        return self._state["records"]

    @property
    def name_input(self) -> str:
        return self._state["name_input"]

    @property
    def color_input(self) -> str:
        return self._state["color_input"]

    @property
    def loaded(self) -> bool:
        """Whether the initial fetch has been issued."""
        return self._state["loaded"]

    @property
    def busy(self) -> bool:
        """True while a fetch or insert is in flight."""
        return self._state["in_flight"] > 0

    def set_name_input(self, value: str):
        self._state["name_input"] = value

    def set_color_input(self, value: str):
        self._state["color_input"] = value

    def pop_notice(self) -> Optional[Notice]:
        """Return the pending notice and clear it."""
        notice = self._state["notice"]
        self._state["notice"] = None
        return notice

    def _notify(self, level: str, message: str):
        self._state["notice"] = Notice(level=level, message=message)

    @contextmanager
    def _busy(self, message: str):
        """Hold the busy flag (and the progress indicator) around a remote call."""
        self._state["in_flight"] += 1
        try:
            with self.progress(message) if self.progress else nullcontext():
                yield
        finally:
            self._state["in_flight"] = max(0, self._state["in_flight"] - 1)

    # ==========================================
    # Table Operations
    # ==========================================

    def ensure_loaded(self):
        """Run the initial fetch the first time the view is shown."""
        if not self._state["loaded"]:
            self._state["loaded"] = True
            self.fetch_all()

    def fetch_all(self) -> bool:
        """
        Replace the snapshot with every row, newest first.

        A response is applied only if no newer fetch was issued while it
        was pending. On failure the current snapshot is kept.

        Streamlit runs a session's script and callbacks one at a time, so
        inside the app a second fetch never starts while one is pending and
        the generation check does not fire. It only matters for callers that
        re-enter the controller from a table client, or run it concurrently.

        Returns:
            True if the snapshot was replaced
        """
        self._state["fetch_generation"] += 1
        generation = self._state["fetch_generation"]

        with self._busy(LOADING_MESSAGE):
            result = self.table.select_all()

        if not result.success:
            self._log_failure("fetching", result)
            return False

        if generation != self._state["fetch_generation"]:
            logger.debug(
                f"Discarding stale fetch #{generation} "
                f"(latest is #{self._state['fetch_generation']})"
            )
            return False

        try:
            people = [Person.model_validate(row) for row in result.rows]
        except ValidationError as e:
            logger.error(f"Error fetching data ({self.table.backend_name}): unexpected row shape - {e}")
            return False

        self._state["records"] = people
        logger.info(f"Fetched {len(people)} people")
        return True

    def add_record(self) -> bool:
        """
        Validate the form inputs and insert one person.

        On success the inputs are cleared before the list is re-fetched.
        On failure the inputs are left as typed so the user can retry.

        Returns:
            True if the insert succeeded
        """
        name = self.name_input.strip()
        color = self.color_input.strip()

        if not name or not color:
            self._notify("warning", VALIDATION_MESSAGE)
            return False

        with self._busy(SAVING_MESSAGE):
            result = self.table.insert(name, color)

        if not result.success:
            self._log_failure("inserting", result)
            self._notify("error", INSERT_FAILED_MESSAGE)
            return False

        logger.info(f"Added {name} with color {color}")
        self.set_name_input("")
        self.set_color_input("")
        self.fetch_all()
        return True

    def delete_record(self, person_id: Optional[int]) -> bool:
        """
        Delete a person by id and re-fetch.

        Deleting an id that no longer exists removes nothing and still
        counts as success.

        Returns:
            True if the delete succeeded
        """
        if person_id is None:
            return False

        with self._busy(DELETING_MESSAGE) if self.busy_on_delete else nullcontext():
            result = self.table.delete_by_id(person_id)

        if not result.success:
            self._log_failure("deleting", result)
            return False

        if result.count == 0:
            logger.info(f"No person with id {person_id} to delete")
        else:
            logger.info(f"Deleted person with id {person_id}")
        self.fetch_all()
        return True

    def _log_failure(self, operation: str, result: QueryResult):
        logger.error(
            f"Error {operation} data ({self.table.backend_name}): "
            f"{result.error} {result.details or ''}".rstrip()
        )
