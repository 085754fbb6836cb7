"""
Database Module Initialization
"""

from restapi.db.session import get_db, init_db, AsyncSessionLocal
from restapi.db.models import Base, User, LogLoginSuccess

__all__ = [
    "get_db",
    "init_db",
    "AsyncSessionLocal",
    "Base",
    "User",
    "LogLoginSuccess",
]
