"""
User Domain Model

Defines User related Data Transfer Objects (DTOs).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from restapi.common.time import ensure_utc
from restapi.rest.dto import RestDto

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserDto(RestDto):
    """User DTO (all fields optional, used for create / update / patch)"""
    
    id: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


class UserForm(BaseModel):
    """User Form Type (valid user input)"""
    
    # Username
    username: str = Field(..., min_length=2, max_length=255, description="Username")
    # First Name
    first_name: str = Field(..., min_length=2, max_length=255, description="First Name")
    # Last Name
    last_name: str = Field(..., min_length=2, max_length=255, description="Last Name")
    # Email
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, description="Email")


class UserResponse(BaseModel):
    """User Response Model"""
    
    id: str
    username: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at", mode="after")
    @classmethod
    def _timestamps_utc(cls, v: datetime) -> datetime:
        dt = ensure_utc(v)
        assert dt is not None
        return dt
