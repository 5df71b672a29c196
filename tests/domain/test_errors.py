"""Tests for domain error classes."""

from carfinder.domain.errors import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


class TestDomainError:
    def test_stores_message_and_context(self) -> None:
        """DomainError keeps its message and any keyword context."""
        error = DomainError("Upstream gave up", source="car-api")

        assert error.message == "Upstream gave up"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {"source": "car-api"}
        assert str(error) == "Upstream gave up"

    def test_to_dict_merges_context(self) -> None:
        error = DomainError("Bad thing", field="brands")

        assert error.to_dict() == {"message": "Bad thing", "code": "DOMAIN_ERROR", "field": "brands"}


class TestValidationError:
    def test_default_message_without_field_errors(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert error.to_dict() == {"message": "Validation error", "code": "VALIDATION_ERROR"}

    def test_field_errors_switch_default_message(self) -> None:
        """With field errors and no message the summary is 'Validation failed'."""
        errors = [{"field": "sortBy", "message": "Unknown field", "code": "INVALID_SORT_FIELD"}]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_custom_message_is_kept_with_field_errors(self) -> None:
        errors = [{"field": "password", "message": "Too short"}]

        error = ValidationError("Registration rejected", errors=errors)

        assert error.message == "Registration rejected"
        assert error.errors == errors


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError(resource="Car", identifier="42")

        assert error.message == "Car with identifier '42' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "Car", "identifier": "42"}

    def test_message_without_identifier(self) -> None:
        error = NotFoundError(resource="User")

        assert error.message == "User not found"


class TestErrorCodes:
    def test_each_subclass_has_its_own_code(self) -> None:
        assert ConflictError("Username already exists").error_code == "CONFLICT"
        assert UnauthorizedError("Not authenticated").error_code == "UNAUTHORIZED"
        assert InternalError("Boom").error_code == "INTERNAL_ERROR"

    def test_all_are_domain_errors(self) -> None:
        for error in (
            ValidationError(),
            NotFoundError("Car"),
            ConflictError("x"),
            UnauthorizedError("x"),
            InternalError("x"),
        ):
            assert isinstance(error, DomainError)
