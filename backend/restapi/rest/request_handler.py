"""
Request Handler Module

Parses the query parameters of list endpoints into repository arguments:

- where:  JSON object, e.g. {"username": "john", "email": null}
- order:  comma separated fields, "-" prefix for descending, e.g. "last_name,-created_at"
- limit / offset: non-negative integers
- search: plain terms ("john doe") or JSON {"and": [...], "or": [...]}
"""

import json
from typing import Any, Optional

from restapi.common.errors import InvalidQueryError
from restapi.config import get_settings
from restapi.repositories.base import Search
from restapi.repositories.sqlalchemy.base import normalize_search


def get_criteria(where: Optional[str]) -> dict[str, Any]:
    """Parse `where` parameter"""
    if where is None or not where.strip():
        return {}
    
    try:
        criteria = json.loads(where)
    except json.JSONDecodeError as e:
        raise InvalidQueryError(
            message="Current 'where' parameter is not valid JSON",
            code="invalid_where",
            details={"reason": str(e)},
        ) from e
    
    if not isinstance(criteria, dict):
        raise InvalidQueryError(
            message="Current 'where' parameter must be a JSON object",
            code="invalid_where",
        )
    return criteria


def get_order_by(order: Optional[str]) -> dict[str, str]:
    """Parse `order` parameter"""
    order_by: dict[str, str] = {}
    if not order:
        return order_by
    
    for item in order.split(","):
        item = item.strip()
        if not item:
            continue
        if item.startswith("-"):
            order_by[item[1:]] = "DESC"
        else:
            order_by[item.lstrip("+")] = "ASC"
    return order_by


def get_limit(limit: Optional[int]) -> Optional[int]:
    """Validate `limit` parameter"""
    if limit is None:
        return None
    
    max_limit = get_settings().QUERY_MAX_LIMIT
    if limit < 0 or limit > max_limit:
        raise InvalidQueryError(
            message=f"Limit must be between 0 and {max_limit}",
            code="invalid_limit",
            details={"limit": limit},
        )
    return limit


def get_offset(offset: Optional[int]) -> Optional[int]:
    """Validate `offset` parameter"""
    if offset is not None and offset < 0:
        raise InvalidQueryError(
            message="Offset must not be negative",
            code="invalid_offset",
            details={"offset": offset},
        )
    return offset


def get_search_terms(search: Optional[str]) -> Optional[Search]:
    """
    Parse `search` parameter
    
    A JSON object is used as an and/or clause, anything else is treated
    as whitespace separated "or" terms.

    Raises:
        InvalidQueryError: Invalid JSON or malformed and/or clause
    """
    if search is None or not search.strip():
        return None
    
    text = search.strip()
    if text.startswith("{"):
        try:
            clause = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidQueryError(
                message="Current 'search' parameter is not valid JSON",
                code="invalid_search",
                details={"reason": str(e)},
            ) from e
        return normalize_search(clause)
    
    return {"or": text.split()}
