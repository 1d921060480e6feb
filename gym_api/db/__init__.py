"""SQL backend helpers (engine, session scope and schema creation)."""

from .session import Base, get_engine, session_scope
from .create_tables import GYM_TABLES, create_all, reset_all

__all__ = ["Base", "GYM_TABLES", "get_engine", "session_scope", "create_all", "reset_all"]
