"""
Reusable UI components.
"""

from views.components.person_form import NAME_KEY, COLOR_KEY, render_person_form
from views.components.person_item import (
    escape_markdown,
    render_color_swatch,
    render_loading_placeholder,
    render_person_row,
    render_people_list,
)

__all__ = [
    # Form
    "NAME_KEY",
    "COLOR_KEY",
    "render_person_form",
    # List
    "escape_markdown",
    "render_color_swatch",
    "render_loading_placeholder",
    "render_person_row",
    "render_people_list",
]
