"""
Base Repository Interface Module

Defines the generic interface for data access, decoupling business logic from specific database implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar, Union

# Define generic type variable
T = TypeVar("T")

# Field name -> value
Criteria = Mapping[str, Any]
# Field name -> "ASC" / "DESC"
OrderBy = Mapping[str, str]
# Whitespace separated terms, a list of terms or {"and": [...], "or": [...]}
Search = Union[str, Sequence[str], Mapping[str, Sequence[str]]]


class BaseRepository(ABC, Generic[T]):
    """
    Base Repository Interface
    
    Defines standard lookup, persistence and introspection operations
    for a single entity type keyed by a string id.
    """
    
    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[T]:
        """Get entity by ID, None when it does not exist"""
        pass
    
    @abstractmethod
    async def find_all(self) -> list[T]:
        """Get all entities"""
        pass
    
    @abstractmethod
    async def find_by(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[T]:
        """
        Get entities matching criteria
        
        Args:
            criteria: Field/value pairs, all of which must match
            order_by: Field/direction pairs
            limit: Max number of entities
            offset: Number of entities to skip
            
        Returns:
            list[T]: Matching entities
        
        Raises:
            InvalidQueryError: Unknown field, direction or paging value
        """
        pass
    
    @abstractmethod
    async def find_one_by(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
    ) -> Optional[T]:
        """Get first entity matching criteria"""
        pass
    
    @abstractmethod
    async def find_by_advanced(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        search: Optional[Search] = None,
    ) -> list[T]:
        """Same as find_by, with an additional free-text search clause"""
        pass
    
    @abstractmethod
    async def count_advanced(
        self,
        criteria: Optional[Criteria] = None,
        search: Optional[Search] = None,
    ) -> int:
        """Count entities matching criteria and search"""
        pass
    
    @abstractmethod
    async def find_ids(
        self,
        criteria: Optional[Criteria] = None,
        search: Optional[Search] = None,
    ) -> list[str]:
        """Get IDs of entities matching criteria and search"""
        pass
    
    @abstractmethod
    async def save(self, entity: T) -> T:
        """Persist entity"""
        pass
    
    @abstractmethod
    async def remove(self, entity: T) -> None:
        """Delete entity"""
        pass
    
    @abstractmethod
    def get_entity_class(self) -> type[T]:
        """Managed entity type"""
        pass

    @abstractmethod
    def get_entity_name(self) -> str:
        """Name of the managed entity type"""
        pass
    
    @abstractmethod
    def get_associations(self) -> dict[str, Any]:
        """Association name -> association metadata"""
        pass
    
    @abstractmethod
    def get_reference(self, id: str) -> Optional[T]:
        """
        Get a reference to an entity without loading it
        
        Must not hit the database; fields are loaded on first access.
        """
        pass
