"""
Domain Model Module Initialization
"""

from restapi.domain.common import CountResponse
from restapi.domain.user import UserDto, UserForm, UserResponse
from restapi.domain.log_login_success import LogLoginSuccessResponse

__all__ = [
    # Common
    "CountResponse",
    # User
    "UserDto",
    "UserForm",
    "UserResponse",
    # Log
    "LogLoginSuccessResponse",
]
