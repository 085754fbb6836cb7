"""
REST Resource Base Module

A resource binds together the repository of one entity type, the
validator and the DTO / form type classes used by the REST layer.
CRUD operations are provided by a composed `ResourceOperations`.
"""

from typing import Any, Generic, Optional

import pydantic
from pydantic import BaseModel

from restapi.common.errors import ConfigurationError, InvalidDtoClassError, NotFoundError
from restapi.repositories.base import BaseRepository, Criteria, OrderBy, Search, T
from restapi.rest.dto import RestDto
from restapi.rest.operations import ResourceOperations
from restapi.rest.validator import Validator


class RestResource(Generic[T]):
    """
    REST Resource Base
    
    Collaborators can be passed to the constructor or set afterwards with
    the chainable setters. The DTO class and form type class are checked
    lazily: their getters raise `ConfigurationError` while unset.
    """
    
    def __init__(
        self,
        repository: Optional[BaseRepository[T]] = None,
        validator: Optional[Validator] = None,
        dto_class: Optional[type[RestDto]] = None,
        form_type_class: Optional[type[BaseModel]] = None,
    ):
        self._repository = repository
        self._validator = validator
        self._dto_class = dto_class
        self._form_type_class = form_type_class
        self.operations = ResourceOperations(self)
    
    # ============ Collaborators ============
    
    def get_repository(self) -> BaseRepository[T]:
        return self._repository
    
    def set_repository(self, repository: BaseRepository[T]) -> "RestResource[T]":
        self._repository = repository
        return self
    
    def get_validator(self) -> Validator:
        return self._validator
    
    def set_validator(self, validator: Validator) -> "RestResource[T]":
        self._validator = validator
        return self
    
    def get_dto_class(self) -> type[RestDto]:
        """
        DTO class used by this resource
        
        Raises:
            ConfigurationError: DTO class has not been set
        """
        if not self._dto_class:
            raise ConfigurationError(
                message=f"DTO class not specified for '{self._resource_name()}' resource",
                code="dto_class_not_specified",
            )
        return self._dto_class
    
    def set_dto_class(self, dto_class: type[RestDto]) -> "RestResource[T]":
        self._dto_class = dto_class
        return self
    
    def get_form_type_class(self) -> type[BaseModel]:
        """
        Form type class (input model) used by this resource
        
        Raises:
            ConfigurationError: Form type class has not been set
        """
        if not self._form_type_class:
            raise ConfigurationError(
                message=f"FormType class not specified for '{self._resource_name()}' resource",
                code="form_type_class_not_specified",
            )
        return self._form_type_class
    
    def set_form_type_class(self, form_type_class: type[BaseModel]) -> "RestResource[T]":
        self._form_type_class = form_type_class
        return self
    
    # ============ Repository passthrough ============
    
    def get_entity_name(self) -> str:
        return self.get_repository().get_entity_name()
    
    def get_reference(self, id: str) -> Optional[T]:
        """Reference to an entity that is loaded on first access"""
        return self.get_repository().get_reference(id)
    
    def get_associations(self) -> list[str]:
        """Names of the associations of the current entity"""
        return list(self.get_repository().get_associations().keys())
    
    async def get_entity(self, id: str) -> T:
        """
        Get entity by ID
        
        Raises:
            NotFoundError: Entity does not exist
        """
        entity = await self.get_repository().find_by_id(id)
        if entity is None:
            raise NotFoundError(
                message=f"{self._resource_name()} with id '{id}' not found",
                code="entity_not_found",
                details={"id": id},
            )
        return entity
    
    async def get_dto_for_entity(
        self,
        id: str,
        dto_class: type[RestDto],
        dto: Optional[RestDto] = None,
    ) -> RestDto:
        """
        Get DTO loaded with entity data
        
        Args:
            id: Entity ID
            dto_class: DTO class to instantiate
            dto: Optional DTO whose set fields are patched over the loaded data
        
        Returns:
            RestDto: New `dto_class` instance
        
        Raises:
            NotFoundError: Entity does not exist
            InvalidDtoClassError: `dto_class` is not a RestDto subclass
            ConfigurationError: `dto_class` cannot be instantiated without arguments
        """
        entity = await self.get_entity(id)
        
        rest_dto = self._create_dto(dto_class)
        rest_dto.load(entity)
        
        if dto is not None:
            rest_dto.patch(dto)
        
        return rest_dto
    
    def _create_dto(self, dto_class: Any) -> RestDto:
        if not (isinstance(dto_class, type) and issubclass(dto_class, RestDto)):
            raise InvalidDtoClassError(
                message=f"'{dto_class!r}' is not a REST DTO class",
                details={"dto_class": repr(dto_class)},
            )
        
        try:
            return dto_class()
        except (TypeError, pydantic.ValidationError) as e:
            raise ConfigurationError(
                message=f"DTO class '{dto_class.__name__}' cannot be instantiated",
                code="dto_instantiation_failed",
                details={"dto_class": dto_class.__name__, "reason": str(e)},
            ) from e
    
    def _resource_name(self) -> str:
        if self._repository is not None:
            return self._repository.get_entity_name()
        return type(self).__name__
    
    # ============ CRUD operations ============
    
    async def find(
        self,
        criteria: Optional[Criteria] = None,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        search: Optional[Search] = None,
    ) -> list[T]:
        return await self.operations.find(criteria, order_by, limit, offset, search)
    
    async def find_one(self, id: str, throw_exception_if_not_found: bool = False) -> Optional[T]:
        return await self.operations.find_one(id, throw_exception_if_not_found)
    
    async def find_one_by(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        throw_exception_if_not_found: bool = False,
    ) -> Optional[T]:
        return await self.operations.find_one_by(criteria, order_by, throw_exception_if_not_found)
    
    async def count(self, criteria: Optional[Criteria] = None, search: Optional[Search] = None) -> int:
        return await self.operations.count(criteria, search)
    
    async def get_ids(self, criteria: Optional[Criteria] = None, search: Optional[Search] = None) -> list[str]:
        return await self.operations.get_ids(criteria, search)
    
    async def create(self, dto: RestDto) -> T:
        return await self.operations.create(dto)
    
    async def update(self, id: str, dto: RestDto) -> T:
        return await self.operations.update(id, dto)
    
    async def patch(self, id: str, dto: RestDto) -> T:
        return await self.operations.patch(id, dto)
    
    async def delete(self, id: str) -> T:
        return await self.operations.delete(id)
