"""
Data Access Layer Module Initialization
"""

from restapi.repositories.base import BaseRepository, Criteria, OrderBy, Search

__all__ = [
    "BaseRepository",
    "Criteria",
    "OrderBy",
    "Search",
]
