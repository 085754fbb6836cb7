"""
SQLAlchemy Repository Implementation Module Initialization
"""

from restapi.repositories.sqlalchemy.base import SQLAlchemyRepository, normalize_search
from restapi.repositories.sqlalchemy.user_repo import SQLAlchemyUserRepository
from restapi.repositories.sqlalchemy.log_login_success_repo import (
    SQLAlchemyLogLoginSuccessRepository,
)

__all__ = [
    "SQLAlchemyRepository",
    "normalize_search",
    "SQLAlchemyUserRepository",
    "SQLAlchemyLogLoginSuccessRepository",
]
