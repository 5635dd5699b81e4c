"""Database helpers and base objects."""

from .base import Base, metadata
from .session import SessionLocal, engine, get_db, init_db

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
    "metadata",
]
