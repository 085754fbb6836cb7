"""
API Dependency Injection Module

Provides the dependencies required by FastAPI routes.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Optional

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from restapi.db.session import get_db as _get_db
from restapi.repositories.base import Search
from restapi.repositories.sqlalchemy import (
    SQLAlchemyLogLoginSuccessRepository,
    SQLAlchemyUserRepository,
)
from restapi.resources import LogLoginSuccessResource, UserResource
from restapi.rest import request_handler
from restapi.rest.validator import PydanticValidator, Validator


async def get_db():
    """
    Get database session dependency
    
    Yields:
        AsyncSession: Async database session
    """
    async for session in _get_db():
        yield session


# Database session dependency type
DbSession = Annotated[AsyncSession, Depends(get_db)]


# ============ Global Singletons ============

# Validator is stateless and shared by all resources
_validator = PydanticValidator()


def get_validator() -> Validator:
    return _validator


# ============ Resource Dependencies ============

def get_user_resource(
    db: DbSession,
    validator: Annotated[Validator, Depends(get_validator)],
) -> UserResource:
    """Get User Resource"""
    return UserResource(SQLAlchemyUserRepository(db), validator)


def get_log_login_success_resource(
    db: DbSession,
    validator: Annotated[Validator, Depends(get_validator)],
) -> LogLoginSuccessResource:
    """Get Successful Login Log Resource"""
    return LogLoginSuccessResource(SQLAlchemyLogLoginSuccessRepository(db), validator)


UserResourceDep = Annotated[UserResource, Depends(get_user_resource)]
LogLoginSuccessResourceDep = Annotated[
    LogLoginSuccessResource, Depends(get_log_login_success_resource)
]


# ============ Query Parameters ============

@dataclass
class ListParameters:
    """Parsed list query parameters"""
    criteria: dict[str, Any]
    order_by: dict[str, str]
    limit: Optional[int]
    offset: Optional[int]
    search: Optional[Search]


def get_list_parameters(
    where: Optional[str] = Query(None, description="JSON criteria object"),
    order: Optional[str] = Query(None, description="Sort fields, '-' prefix for descending"),
    limit: Optional[int] = Query(None, description="Max number of items"),
    offset: Optional[int] = Query(None, description="Number of items to skip"),
    search: Optional[str] = Query(None, description="Search terms or JSON and/or clause"),
) -> ListParameters:
    return ListParameters(
        criteria=request_handler.get_criteria(where),
        order_by=request_handler.get_order_by(order),
        limit=request_handler.get_limit(limit),
        offset=request_handler.get_offset(offset),
        search=request_handler.get_search_terms(search),
    )


def get_count_parameters(
    where: Optional[str] = Query(None, description="JSON criteria object"),
    search: Optional[str] = Query(None, description="Search terms or JSON and/or clause"),
) -> ListParameters:
    return ListParameters(
        criteria=request_handler.get_criteria(where),
        order_by={},
        limit=None,
        offset=None,
        search=request_handler.get_search_terms(search),
    )


ListParametersDep = Annotated[ListParameters, Depends(get_list_parameters)]
CountParametersDep = Annotated[ListParameters, Depends(get_count_parameters)]
