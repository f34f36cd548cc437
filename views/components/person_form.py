"""
Add-person form component.
"""

import streamlit as st
from typing import Callable

# Widget keys; the view syncs these with the controller's inputs
NAME_KEY = "people_name_input"
COLOR_KEY = "people_color_input"


def render_person_form(on_submit: Callable[[], None]):
    """
    Render the name/color form.

    Pressing Enter in either field submits the form, same as clicking Add.
    The submit callback runs before the rerun, under the controller's spinner.

    Args:
        on_submit: Callback run (before the rerun) when the form is submitted
    """
    with st.container(border=True):
        with st.form("add_person", border=False):
            col_name, col_color, col_add = st.columns([3, 3, 1])

            with col_name:
                st.text_input(
                    "Name",
                    key=NAME_KEY,
                    placeholder="Name",
                    label_visibility="collapsed",
                )
            with col_color:
                st.text_input(
                    "Favorite color",
                    key=COLOR_KEY,
                    placeholder="Favorite color",
                    label_visibility="collapsed",
                )
            with col_add:
                st.form_submit_button(
                    "Add",
                    type="primary",
                    on_click=on_submit,
                    use_container_width=True,
                )
