"""Database module for the short URL service."""
from shorturl.db.base import get_engine, get_session_factory, get_session, init_models
from shorturl.db.session import get_db

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_session",
    "init_models",
    "get_db",
]
