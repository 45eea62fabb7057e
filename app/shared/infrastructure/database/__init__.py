from .connection import Base, db_manager, init_database, close_database
from .session import get_db_session, database_session, initialize_sessions, session_manager

__all__ = [
    "Base",
    "db_manager",
    "init_database",
    "close_database",
    "get_db_session",
    "database_session",
    "initialize_sessions",
    "session_manager",
]
