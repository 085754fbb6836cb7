"""
Successful Login Log Resource
"""

from typing import Optional

from restapi.db.models import LogLoginSuccess
from restapi.repositories.sqlalchemy.log_login_success_repo import (
    SQLAlchemyLogLoginSuccessRepository,
)
from restapi.rest.resource import RestResource
from restapi.rest.validator import Validator


class LogLoginSuccessResource(RestResource[LogLoginSuccess]):
    """
    Successful Login Log Resource
    
    Read-only: log rows are written by the login flow, so no DTO or
    form type is configured.
    """
    
    def __init__(
        self,
        repository: SQLAlchemyLogLoginSuccessRepository,
        validator: Optional[Validator] = None,
    ):
        super().__init__(repository=repository, validator=validator)
