"""
Favorite Colors - Home Page

Add people with their favorite color, see everyone newest first, and
remove entries. Data lives in a hosted Supabase table.
"""

import logging

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Favorite Colors",
    page_icon="🎨",
    layout="centered"
)

from config.settings import get_settings
from views.people_view import PeopleView

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

view = PeopleView()
view.render()
