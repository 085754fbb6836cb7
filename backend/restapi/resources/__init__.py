"""
Resource Module Initialization
"""

from restapi.resources.user_resource import UserResource
from restapi.resources.log_login_success_resource import LogLoginSuccessResource

__all__ = [
    "UserResource",
    "LogLoginSuccessResource",
]
