"""
Resource Operations Module

CRUD operation set shared by all REST resources.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from restapi.common.errors import NotFoundError, ValidationError
from restapi.repositories.base import Criteria, OrderBy, Search
from restapi.rest.dto import RestDto

if TYPE_CHECKING:
    from restapi.rest.resource import RestResource

logger = logging.getLogger(__name__)


class ResourceOperations:
    """
    Resource Operations
    
    Implements find / count / create / update / patch / delete on top of
    the collaborators configured on a resource.
    """
    
    def __init__(self, resource: "RestResource"):
        self.resource = resource
    
    @property
    def repository(self):
        return self.resource.get_repository()
    
    async def find(
        self,
        criteria: Optional[Criteria] = None,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        search: Optional[Search] = None,
    ) -> list[Any]:
        """Get entities matching criteria and search"""
        return await self.repository.find_by_advanced(
            criteria or {}, order_by, limit, offset, search
        )
    
    async def find_one(self, id: str, throw_exception_if_not_found: bool = False) -> Optional[Any]:
        """Get entity by ID, optionally raising NotFoundError when missing"""
        if throw_exception_if_not_found:
            return await self.resource.get_entity(id)
        return await self.repository.find_by_id(id)
    
    async def find_one_by(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        throw_exception_if_not_found: bool = False,
    ) -> Optional[Any]:
        """Get first entity matching criteria"""
        entity = await self.repository.find_one_by(criteria, order_by)
        if entity is None and throw_exception_if_not_found:
            raise NotFoundError(
                message=f"{self.repository.get_entity_name()} not found",
                code="entity_not_found",
                details={"criteria": {key: str(value) for key, value in criteria.items()}},
            )
        return entity
    
    async def count(self, criteria: Optional[Criteria] = None, search: Optional[Search] = None) -> int:
        return await self.repository.count_advanced(criteria, search)
    
    async def get_ids(self, criteria: Optional[Criteria] = None, search: Optional[Search] = None) -> list[str]:
        return await self.repository.find_ids(criteria, search)
    
    async def create(self, dto: RestDto) -> Any:
        """
        Create entity from DTO
        
        Raises:
            ValidationError: DTO does not satisfy the form type
        """
        self._validate(dto)
        
        entity = dto.update(self.repository.get_entity_class()())
        entity = await self.repository.save(entity)
        
        logger.info("Created %s id=%s", self.repository.get_entity_name(), entity.id)
        return entity
    
    async def update(self, id: str, dto: RestDto) -> Any:
        """
        Replace entity data with DTO data
        
        Raises:
            NotFoundError: Entity does not exist
            ValidationError: DTO does not satisfy the form type
        """
        entity = await self.resource.get_entity(id)
        self._validate(dto)
        
        dto.update(entity)
        entity = await self.repository.save(entity)
        
        logger.info("Updated %s id=%s", self.repository.get_entity_name(), id)
        return entity
    
    async def patch(self, id: str, dto: RestDto) -> Any:
        """
        Merge DTO data into entity
        
        The current entity data is loaded into a new DTO, the given DTO is
        patched over it and the merged result is validated and applied.
        
        Raises:
            NotFoundError: Entity does not exist
            ValidationError: Merged data does not satisfy the form type
        """
        entity = await self.resource.get_entity(id)
        merged = await self.resource.get_dto_for_entity(id, type(dto), dto)
        self._validate(merged)
        
        merged.update(entity)
        entity = await self.repository.save(entity)
        
        logger.info(
            "Patched %s id=%s fields=%s",
            self.repository.get_entity_name(),
            id,
            sorted(dto.get_visited()),
        )
        return entity
    
    async def delete(self, id: str) -> Any:
        """
        Delete entity
        
        Returns:
            The deleted entity
        
        Raises:
            NotFoundError: Entity does not exist
        """
        entity = await self.resource.get_entity(id)
        await self.repository.remove(entity)
        
        logger.info("Deleted %s id=%s", self.repository.get_entity_name(), id)
        return entity
    
    def _validate(self, dto: RestDto) -> None:
        violations = self.resource.get_validator().validate(
            dto, self.resource.get_form_type_class()
        )
        if violations:
            raise ValidationError(
                message=f"Validation failed for '{self.repository.get_entity_name()}'",
                details={"violations": [violation.to_dict() for violation in violations]},
            )
