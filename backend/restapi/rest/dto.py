"""
REST DTO Base Module

Data Transfer Objects move entity data across the API boundary.
A DTO can be loaded from an entity, patched from another DTO and
written back onto an entity.
"""

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

DtoT = TypeVar("DtoT", bound="RestDto")


class RestDto(BaseModel):
    """
    REST DTO Base Model
    
    All fields of a subclass must have defaults, so that a DTO can be
    created empty and populated with `load()`.
    
    Fields explicitly set on an instance (by the constructor or by
    assignment) are its "visited" fields. Only visited fields are copied
    by `patch()` and written to entities by `update()`.
    """
    
    model_config = ConfigDict(validate_assignment=True, extra="ignore")
    
    # Fields never written to an entity
    readonly_fields: ClassVar[frozenset[str]] = frozenset({"id"})
    
    def get_visited(self) -> set[str]:
        """Names of explicitly set fields"""
        return set(self.model_fields_set)
    
    def load(self: DtoT, entity: Any) -> DtoT:
        """
        Populate DTO from entity
        
        Every declared field that the entity carries is copied.
        
        Args:
            entity: Source entity
        
        Returns:
            RestDto: self
        """
        for name in type(self).model_fields:
            if hasattr(entity, name):
                setattr(self, name, getattr(entity, name))
        return self
    
    def patch(self: DtoT, dto: "RestDto") -> DtoT:
        """
        Merge fields from another DTO
        
        Fields explicitly set on `dto` override the values of this DTO,
        including explicit `None` values. Unset fields are left untouched.
        
        Args:
            dto: Source DTO
        
        Returns:
            RestDto: self
        """
        fields = type(self).model_fields
        for name in dto.get_visited():
            if name in fields:
                setattr(self, name, getattr(dto, name))
        return self
    
    def update(self, entity: Any) -> Any:
        """
        Write visited fields onto entity
        
        Read-only fields and fields the entity does not declare are skipped.
        
        Args:
            entity: Target entity
        
        Returns:
            The updated entity
        """
        for name in sorted(self.get_visited() - self.readonly_fields):
            if hasattr(type(entity), name):
                setattr(entity, name, getattr(self, name))
        return entity
