"""
User Repository SQLAlchemy Implementation
"""

from restapi.db.models import User
from restapi.repositories.sqlalchemy.base import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User]):
    """User Repository"""
    
    entity_class = User
    search_columns = ("username", "first_name", "last_name", "email")
