"""
REST Layer Module Initialization
"""

from restapi.rest.dto import RestDto
from restapi.rest.validator import ConstraintViolation, PydanticValidator, Validator
from restapi.rest.operations import ResourceOperations
from restapi.rest.resource import RestResource

__all__ = [
    "RestDto",
    "ConstraintViolation",
    "PydanticValidator",
    "Validator",
    "ResourceOperations",
    "RestResource",
]
