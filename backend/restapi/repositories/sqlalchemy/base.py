"""
Generic SQLAlchemy Repository Implementation

Provides the shared query, persistence and metadata operations
for all entity repositories. Concrete repositories only declare
the mapped entity class and their search columns.
"""

import logging
from typing import Any, Mapping, Optional

from sqlalchemy import Select, and_, func, inspect as sa_inspect, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import RelationshipProperty, make_transient_to_detached
from sqlalchemy.orm.interfaces import MANYTOONE
from sqlalchemy.orm.util import identity_key

from restapi.common.errors import ConflictError, InvalidQueryError
from restapi.repositories.base import BaseRepository, Criteria, OrderBy, Search, T

logger = logging.getLogger(__name__)

SORT_DIRECTIONS = ("ASC", "DESC")
SEARCH_OPERANDS = ("and", "or")


class SQLAlchemyRepository(BaseRepository[T]):
    """
    SQLAlchemy Repository Base
    
    Implements the repository contract for one mapped entity class.
    
    Class attributes:
        entity_class: Mapped ORM class handled by the repository
        search_columns: Column names matched by free-text search
    """
    
    entity_class: type[T]
    search_columns: tuple[str, ...] = ()
    
    def __init__(self, session: AsyncSession):
        """
        Initialize Repository
        
        Args:
            session: Async database session
        """
        self.session = session
    
    @property
    def _mapper(self):
        return sa_inspect(self.entity_class)
    
    # ============ Lookups ============
    
    async def find_by_id(self, id: str) -> Optional[T]:
        """Get entity by ID"""
        return await self.session.get(self.entity_class, id)
    
    async def find_all(self) -> list[T]:
        """Get all entities"""
        result = await self.session.execute(select(self.entity_class))
        return list(result.scalars().all())
    
    async def find_by(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[T]:
        """Get entities matching criteria"""
        return await self.find_by_advanced(criteria, order_by, limit, offset)
    
    async def find_one_by(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
    ) -> Optional[T]:
        """Get first entity matching criteria"""
        entities = await self.find_by(criteria, order_by, limit=1)
        return entities[0] if entities else None
    
    async def find_by_advanced(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        search: Optional[Search] = None,
    ) -> list[T]:
        """Get entities matching criteria and search"""
        stmt = self._filtered(select(self.entity_class), criteria, search)
        stmt = self._apply_order(stmt, order_by)
        stmt = self._apply_paging(stmt, limit, offset)
        
        logger.debug("Query %s: %s", self.get_entity_name(), stmt)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
    
    async def count_advanced(
        self,
        criteria: Optional[Criteria] = None,
        search: Optional[Search] = None,
    ) -> int:
        """Count entities matching criteria and search"""
        stmt = self._filtered(
            select(func.count()).select_from(self.entity_class), criteria, search
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
    
    async def find_ids(
        self,
        criteria: Optional[Criteria] = None,
        search: Optional[Search] = None,
    ) -> list[str]:
        """Get IDs of entities matching criteria and search"""
        primary_key = self._mapper.primary_key[0]
        stmt = self._filtered(select(primary_key), criteria, search)
        result = await self.session.execute(stmt)
        return [str(value) for value in result.scalars().all()]
    
    # ============ Persistence ============
    
    async def save(self, entity: T) -> T:
        """
        Persist entity and commit

        Raises:
            ConflictError: A unique or foreign key constraint was violated
        """
        self.session.add(entity)
        await self._commit()
        await self.session.refresh(entity)
        return entity

    async def remove(self, entity: T) -> None:
        """Delete entity and commit"""
        await self.session.delete(entity)
        await self._commit()

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Integrity error on %s: %s", self.get_entity_name(), e.orig)
            raise ConflictError(
                message=f"{self.get_entity_name()} conflicts with an existing record",
                code="integrity_error",
            ) from e

    # ============ Metadata ============

    def get_entity_class(self) -> type[T]:
        return self.entity_class

    def get_entity_name(self) -> str:
        return self.entity_class.__name__
    
    def get_associations(self) -> dict[str, RelationshipProperty]:
        return dict(self._mapper.relationships.items())
    
    def get_reference(self, id: str) -> Optional[T]:
        """
        Get a reference to an entity without loading it
        
        Returns the instance from the session's identity map when it is
        already loaded. Otherwise a persistent instance carrying only its
        primary key is attached to the session; all other attributes are
        expired and are loaded on first access (use ``awaitable_attrs``).
        """
        existing = self.session.identity_map.get(identity_key(self.entity_class, id))
        if existing is not None:
            return existing
        
        primary_key = self._mapper.get_property_by_column(self._mapper.primary_key[0])
        reference = self.entity_class(**{primary_key.key: id})
        make_transient_to_detached(reference)
        self.session.add(reference)
        return reference
    
    # ============ Query building ============
    
    def _filtered(self, stmt: Select, criteria: Optional[Criteria], search: Optional[Search]) -> Select:
        conditions = [
            self._criterion(field, value) for field, value in (criteria or {}).items()
        ]
        search_condition = self._search_condition(search)
        if search_condition is not None:
            conditions.append(search_condition)
        
        if conditions:
            stmt = stmt.where(and_(*conditions))
        return stmt
    
    def _criterion(self, field: str, value: Any):
        mapper = self._mapper
        
        if field in mapper.column_attrs:
            column = getattr(self.entity_class, field)
        elif field in mapper.relationships:
            relationship = mapper.relationships[field]
            if relationship.direction is not MANYTOONE or len(relationship.local_columns) != 1:
                raise InvalidQueryError(
                    message=f"Association '{field}' of '{self.get_entity_name()}' cannot be used as criteria",
                    code="unsupported_association",
                    details={"field": field},
                )
            column = next(iter(relationship.local_columns))
            if isinstance(value, (list, tuple, set, frozenset)):
                value = [self._related_id(relationship, item) for item in value]
            else:
                value = self._related_id(relationship, value)
        else:
            raise self._unknown_field(field)

        items = value if isinstance(value, (list, tuple, set, frozenset)) else [value]
        if any(isinstance(item, (Mapping, list, tuple, set, frozenset)) for item in items):
            raise InvalidQueryError(
                message=f"Criteria value for field '{field}' must be a scalar or a list of scalars",
                code="invalid_criteria",
                details={"field": field},
            )

        if value is None:
            return column.is_(None)
        if isinstance(value, (list, tuple, set, frozenset)):
            return column.in_(list(value))
        return column == value
    
    @staticmethod
    def _related_id(relationship: RelationshipProperty, value: Any) -> Any:
        if isinstance(value, relationship.mapper.class_):
            remote_column = next(iter(relationship.remote_side))
            key = relationship.mapper.get_property_by_column(remote_column).key
            return getattr(value, key)
        return value
    
    def _apply_order(self, stmt: Select, order_by: Optional[OrderBy]) -> Select:
        for field, direction in (order_by or {}).items():
            if field not in self._mapper.column_attrs:
                raise self._unknown_field(field)
            
            normalized = str(direction).upper()
            if normalized not in SORT_DIRECTIONS:
                raise InvalidQueryError(
                    message=f"Invalid sort direction '{direction}' for field '{field}'",
                    code="invalid_sort_direction",
                    details={"field": field, "direction": direction},
                )
            
            column = getattr(self.entity_class, field)
            stmt = stmt.order_by(column.asc() if normalized == "ASC" else column.desc())
        return stmt
    
    @staticmethod
    def _apply_paging(stmt: Select, limit: Optional[int], offset: Optional[int]) -> Select:
        if limit is not None:
            if limit < 0:
                raise InvalidQueryError(
                    message="Limit must not be negative", code="invalid_limit"
                )
            stmt = stmt.limit(limit)
        if offset is not None:
            if offset < 0:
                raise InvalidQueryError(
                    message="Offset must not be negative", code="invalid_offset"
                )
            stmt = stmt.offset(offset)
        return stmt
    
    def _search_condition(self, search: Optional[Search]):
        terms = normalize_search(search)
        if not self.search_columns or not (terms["and"] or terms["or"]):
            return None
        
        columns = [getattr(self.entity_class, name) for name in self.search_columns]
        
        def matches(term: str):
            return or_(*(column.ilike(f"%{term}%") for column in columns))
        
        parts = []
        if terms["and"]:
            parts.append(and_(*(matches(term) for term in terms["and"])))
        if terms["or"]:
            parts.append(or_(*(matches(term) for term in terms["or"])))
        return and_(*parts)
    
    def _unknown_field(self, field: str) -> InvalidQueryError:
        return InvalidQueryError(
            message=f"Unrecognized field '{field}' for entity '{self.get_entity_name()}'",
            code="unrecognized_field",
            details={"field": field},
        )


def normalize_search(search: Optional[Search]) -> dict[str, list[str]]:
    """
    Normalize a search clause to {"and": [...], "or": [...]}
    
    - None -> no terms
    - "foo bar" -> or-terms ["foo", "bar"]
    - ["foo", "bar"] -> or-terms
    - {"and": [...], "or": [...]} -> as given
    
    Raises:
        InvalidQueryError: Unknown operand or a value that is not a list of terms
    """
    if search is None:
        return {"and": [], "or": []}

    if isinstance(search, str):
        return {"and": [], "or": search.split()}

    if isinstance(search, Mapping):
        unknown = set(search) - set(SEARCH_OPERANDS)
        if unknown:
            raise InvalidQueryError(
                message=f"Unsupported search operand(s): {', '.join(sorted(unknown))}",
                code="invalid_search",
                details={"operands": sorted(unknown)},
            )
        return {
            operand: _terms(search.get(operand), operand) for operand in SEARCH_OPERANDS
        }

    return {"and": [], "or": _terms(search, "or")}


def _terms(value: Any, operand: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if not isinstance(value, (list, tuple)):
        raise _invalid_search_terms(operand)

    terms = []
    for term in value:
        # Only scalar terms; nested lists or objects cannot be matched
        if isinstance(term, bool) or not isinstance(term, (str, int, float)):
            raise _invalid_search_terms(operand)
        term = str(term).strip()
        if term:
            terms.append(term)
    return terms


def _invalid_search_terms(operand: str) -> InvalidQueryError:
    return InvalidQueryError(
        message=f"Search operand '{operand}' must be a string or a list of strings",
        code="invalid_search",
        details={"operand": operand},
    )
