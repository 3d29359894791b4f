"""Database package - models, session, and key-value store."""
from cooking_assistant.db.base import Base
from cooking_assistant.db.models import KVEntry
from cooking_assistant.db.session import SessionLocal, engine, get_session

__all__ = [
    "Base",
    "KVEntry",
    # Session
    "engine",
    "SessionLocal",
    "get_session",
]
