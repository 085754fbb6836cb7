"""
Error definition tests
"""

from restapi.common.errors import (
    AppError,
    ConfigurationError,
    ConflictError,
    InvalidDtoClassError,
    InvalidQueryError,
    NotFoundError,
    ValidationError,
)


def test_status_codes():
    assert ConfigurationError().status_code == 500
    assert InvalidDtoClassError().status_code == 500
    assert NotFoundError().status_code == 404
    assert InvalidQueryError().status_code == 400
    assert ValidationError().status_code == 422
    assert ConflictError().status_code == 409


def test_all_errors_are_app_errors():
    for error_class in (
        ConfigurationError,
        ConflictError,
        InvalidDtoClassError,
        InvalidQueryError,
        NotFoundError,
        ValidationError,
    ):
        assert issubclass(error_class, AppError)


def test_to_dict():
    error = InvalidQueryError(message="Unrecognized field 'x'", details={"field": "x"})
    
    assert error.to_dict() == {
        "error": {
            "message": "Unrecognized field 'x'",
            "type": "invalid_request_error",
            "code": "invalid_query",
            "details": {"field": "x"},
        }
    }
    assert "details" not in error.to_dict(include_details=False)["error"]
    assert str(error) == "Unrecognized field 'x'"
