"""
Project persistence.

get_store() is the FastAPI dependency routers use. STORE_BACKEND picks the
implementation: 'sql' (default) or 'memory'.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db
from .base import ProjectStore, validate_project_input
from .memory import InMemoryProjectStore
from .sql import SqlProjectStore

__all__ = ["ProjectStore", "InMemoryProjectStore", "SqlProjectStore", "validate_project_input", "get_store"]

# Shared across requests when STORE_BACKEND=memory
_memory_store = InMemoryProjectStore()


def get_store(db: Session = Depends(get_db)) -> ProjectStore:
    if settings.STORE_BACKEND == "memory":
        return _memory_store
    return SqlProjectStore(db)
