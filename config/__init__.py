"""
Config Package - Application configuration and database setup.
"""

from config.settings import Settings, get_settings
from config.database import Base, get_engine, get_session_factory

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Database
    "Base",
    "get_engine",
    "get_session_factory",
]
