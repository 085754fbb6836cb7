"""
Validator Module

Validates objects against pydantic models and reports constraint
violations instead of raising.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

import pydantic
from pydantic import BaseModel


@dataclass(frozen=True)
class ConstraintViolation:
    """A single failed constraint"""
    
    # Dotted path of the offending field, empty for object level violations
    property_path: str
    message: str
    code: str = "invalid"
    
    def to_dict(self) -> dict[str, str]:
        return {
            "property_path": self.property_path,
            "message": self.message,
            "code": self.code,
        }


class Validator(ABC):
    """Validator Interface"""
    
    @abstractmethod
    def validate(
        self, value: Any, schema: Optional[type[BaseModel]] = None
    ) -> list[ConstraintViolation]:
        """
        Validate value
        
        Args:
            value: Object to validate
            schema: Model describing valid data, defaults to the value's own class
        
        Returns:
            list[ConstraintViolation]: Empty when the value is valid
        """
        pass


class PydanticValidator(Validator):
    """
    Pydantic Validator
    
    Validates the explicitly set data of a pydantic model (or a plain
    mapping) against a pydantic model class.
    """
    
    def validate(
        self, value: Any, schema: Optional[type[BaseModel]] = None
    ) -> list[ConstraintViolation]:
        if isinstance(value, BaseModel):
            data = value.model_dump(exclude_unset=True)
            schema = schema or type(value)
        elif isinstance(value, dict):
            data = value
        else:
            raise TypeError(
                f"Cannot validate object of type '{type(value).__name__}'"
            )
        
        if schema is None:
            raise TypeError("A schema is required to validate a mapping")
        
        try:
            schema.model_validate(data)
        except pydantic.ValidationError as e:
            return violations_from_error(e)
        return []


def violations_from_error(error: pydantic.ValidationError) -> list[ConstraintViolation]:
    """Convert pydantic validation errors to constraint violations"""
    return [
        ConstraintViolation(
            property_path=".".join(str(part) for part in item["loc"]),
            message=item["msg"],
            code=item["type"],
        )
        for item in error.errors()
    ]
