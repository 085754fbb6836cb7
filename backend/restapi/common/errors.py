"""
Error Definitions

Defines custom exception classes used in the application for unified error handling.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception
    
    Base class for all custom exceptions, containing error message, type, and code.
    """
    
    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500,
    ):
        """
        Initialize exception
        
        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
            status_code: HTTP status code
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}
        self.status_code = status_code
    
    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Convert to dictionary format (for API response)
        
        Args:
            include_details: Whether to include `details` in the payload
        
        Returns:
            dict: Error information dictionary
        """
        result = {
            "error": {
                "message": self.message,
                "type": self.error_type,
                "code": self.code,
            }
        }
        if include_details and self.details:
            result["error"]["details"] = self.details
        return result


class ConfigurationError(AppError):
    """
    Configuration Error
    
    Raised when a resource is used before it is wired correctly,
    e.g. the DTO class or form type class was never set.
    """
    
    def __init__(
        self,
        message: str = "Resource is not configured",
        code: str = "configuration_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="configuration_error",
            code=code,
            details=details,
            status_code=500,
        )


class InvalidDtoClassError(AppError):
    """
    Invalid DTO Class Error
    
    Raised when a class passed as DTO class is not a REST DTO type.
    """
    
    def __init__(
        self,
        message: str = "Invalid DTO class",
        code: str = "invalid_dto_class",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="logic_error",
            code=code,
            details=details,
            status_code=500,
        )


class NotFoundError(AppError):
    """
    Resource Not Found Error
    
    Raised when requested entity does not exist.
    """
    
    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "not_found",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="not_found_error",
            code=code,
            details=details,
            status_code=404,
        )


class InvalidQueryError(AppError):
    """
    Invalid Query Error
    
    Raised when a repository query references unknown fields,
    uses an invalid sort direction or invalid paging values.
    """
    
    def __init__(
        self,
        message: str = "Invalid query",
        code: str = "invalid_query",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="invalid_request_error",
            code=code,
            details=details,
            status_code=400,
        )


class ValidationError(AppError):
    """
    Parameter Validation Error
    
    Raised when submitted data does not satisfy the resource's form type.
    """
    
    def __init__(
        self,
        message: str = "Validation failed",
        code: str = "validation_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="validation_error",
            code=code,
            details=details,
            status_code=422,
        )


class ConflictError(AppError):
    """
    Resource Conflict Error
    
    Raised when persisting an entity violates a uniqueness or integrity constraint.
    """
    
    def __init__(
        self,
        message: str = "Resource conflict",
        code: str = "conflict",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="conflict_error",
            code=code,
            details=details,
            status_code=409,
        )
