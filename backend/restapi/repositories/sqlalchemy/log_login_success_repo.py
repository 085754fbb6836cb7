"""
Successful Login Log Repository SQLAlchemy Implementation
"""

from restapi.db.models import LogLoginSuccess
from restapi.repositories.sqlalchemy.base import SQLAlchemyRepository


class SQLAlchemyLogLoginSuccessRepository(SQLAlchemyRepository[LogLoginSuccess]):
    """
    Successful Login Log Repository
    
    Everything is inherited from the generic repository; log rows are
    searched by request and client details.
    """
    
    entity_class = LogLoginSuccess
    search_columns = ("ip", "host", "agent", "client_name", "os_name")
