"""
People View - UI for the favorite colors list.

This view handles:
- The add-person form (submits on Enter or the Add button)
- Showing validation and insert failures
- The people list with per-row delete
- A spinner while a request is in flight
"""

from typing import Optional

import streamlit as st

from config.settings import get_settings
from controllers.people_controller import PeopleController
from services.people_table import get_people_table
from views.components.person_form import NAME_KEY, COLOR_KEY, render_person_form
from views.components.person_item import render_loading_placeholder, render_people_list


class PeopleView:
    """View for the people list UI."""

    def __init__(self, controller: Optional[PeopleController] = None):
        if controller is None:
            settings = get_settings()
            controller = PeopleController(
                get_people_table(),
                busy_on_delete=settings.delete_sets_busy,
            )
        if controller.progress is None:
            controller.progress = self._spinner
        self.controller = controller

    def render(self):
        """Main render method."""
        st.title("Favorite Colors 🎨")

        if not self.controller.loaded:
            # Drawn before the first fetch so it is on screen while it runs
            placeholder = render_loading_placeholder()
            self.controller.ensure_loaded()
            placeholder.empty()

        self._render_notice()
        render_person_form(on_submit=self._submit)
        render_people_list(
            people=self.controller.records,
            on_delete=self.controller.delete_record,
        )

    def _spinner(self, message: str):
        return st.spinner(message)

    def _render_notice(self):
        """Show the pending notice, if any, once."""
        notice = self.controller.pop_notice()
        if not notice:
            return
        if notice.level == "error":
            st.error(notice.message)
        else:
            st.warning(notice.message)

    def _submit(self):
        """Form callback: copy the widget values in, add, copy the result back."""
        self.controller.set_name_input(st.session_state.get(NAME_KEY, ""))
        self.controller.set_color_input(st.session_state.get(COLOR_KEY, ""))

        self.controller.add_record()

        # Cleared on success, kept as typed on failure
        st.session_state[NAME_KEY] = self.controller.name_input
        st.session_state[COLOR_KEY] = self.controller.color_input
