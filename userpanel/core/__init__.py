"""Core app configuration, database, and security."""

from userpanel.core.config import get_settings, settings
from userpanel.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
