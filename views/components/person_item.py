"""
Person list components.

Provides a list row with a color swatch and a delete button.
"""

import html
import re

import streamlit as st
from typing import Callable, Optional

from models import Person

SWATCH_STYLE = (
    "width:2rem; height:2rem; border-radius:999px; "
    "border:2px solid #d1d5db; background-color:{color};"
)

# Markdown, HTML and Streamlit ($ math, :emoji:) control characters
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>$:&])")


def escape_markdown(text: str) -> str:
    """Backslash-escape user text so st.markdown shows it literally."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def render_color_swatch(color: str):
    """Render a round swatch filled with the given CSS color."""
    safe = html.escape(color, quote=True)
    st.markdown(
        f"<div style=\"{SWATCH_STYLE.format(color=safe)}\" title=\"{safe}\"></div>",
        unsafe_allow_html=True,
    )


def render_person_row(
    person: Person,
    on_delete: Callable[[Optional[int]], None],
):
    """
    Render one person row.

    Args:
        person: The person to show (must come from the table, so it has an id)
        on_delete: Callback with the person's id when Delete is clicked
    """
    col_swatch, col_text, col_delete = st.columns([0.6, 6, 1.4])

    with col_swatch:
        render_color_swatch(person.favorite_color)

    with col_text:
        st.markdown(f"**{escape_markdown(person.name)}** — {escape_markdown(person.favorite_color)}")

    with col_delete:
        if st.button("Delete", key=f"delete_{person.id}", disabled=person.id is None):
            on_delete(person.id)
            st.rerun()


def render_loading_placeholder():
    """
    Show the loading state of the list card.

    Returns:
        The placeholder, so the caller can clear it once the fetch settles
    """
    placeholder = st.empty()
    with placeholder.container(border=True):
        st.caption("*Loading...*")
    return placeholder


def render_people_list(
    people: list[Person],
    on_delete: Callable[[Optional[int]], None],
):
    """
    Render the list card with its header and empty state.

    Args:
        people: Snapshot to show, newest first
        on_delete: Callback for the delete buttons
    """
    with st.container(border=True):
        st.subheader(f"People ({len(people)})")

        if not people:
            st.caption("*No people yet. Add someone above!*")
            return

        for person in people:
            render_person_row(person, on_delete)
