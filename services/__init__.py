"""
Services layer - data access clients, no Streamlit dependencies.
"""

from services.people_table import (
    PeopleTable,
    QueryResult,
    SupabaseRestTable,
    SqlPeopleTable,
    get_people_table,
)

__all__ = [
    "PeopleTable",
    "QueryResult",
    "SupabaseRestTable",
    "SqlPeopleTable",
    "get_people_table",
]
