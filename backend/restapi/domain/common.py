"""
Shared Response Models
"""

from pydantic import BaseModel


class CountResponse(BaseModel):
    """Count Response"""
    count: int
