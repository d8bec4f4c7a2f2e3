from app.core.config import get_database_url, get_form_length
from app.core.database import Base, SessionLocal, engine, get_db, init_db

__all__ = [
    "get_database_url",
    "get_form_length",
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
]
