"""
API Router Module Initialization
"""

from restapi.api.user import router as user_router
from restapi.api.log_login_success import router as log_login_success_router

__all__ = [
    "user_router",
    "log_login_success_router",
]
