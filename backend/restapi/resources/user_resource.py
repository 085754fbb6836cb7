"""
User Resource
"""

from typing import Optional

from restapi.db.models import User
from restapi.domain.user import UserDto, UserForm
from restapi.repositories.sqlalchemy.user_repo import SQLAlchemyUserRepository
from restapi.rest.resource import RestResource
from restapi.rest.validator import Validator


class UserResource(RestResource[User]):
    """User Resource, supports the full CRUD operation set"""
    
    def __init__(
        self,
        repository: SQLAlchemyUserRepository,
        validator: Optional[Validator] = None,
    ):
        super().__init__(
            repository=repository,
            validator=validator,
            dto_class=UserDto,
            form_type_class=UserForm,
        )
