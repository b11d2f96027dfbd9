from typing import Any


class ServiceError(Exception):
    code = 500
    error = 'Internal server error'

    def __init__(self, message: str | None = None, **extra: Any) -> None:  # noqa: ANN401
        super().__init__(message or self.error)
        self.message = message
        self.extra = extra


class Unauthenticated(ServiceError):
    code = 401
    error = 'Access token required'

    def __init__(self) -> None:
        super().__init__('Please provide Bearer token in Authorization header')


class InvalidOrExpiredToken(ServiceError):
    code = 403
    error = 'Invalid or expired token'

    def __init__(self) -> None:
        super().__init__('Please login again to get a new token')


class InvalidCredentials(ServiceError):
    code = 401
    error = 'Invalid credentials'


class Forbidden(ServiceError):
    code = 403
    error = 'Access denied'

    def __init__(self, role: str, message: str) -> None:
        super().__init__(message, yourRole=role)


class NotFound(ServiceError):
    code = 404
    error = 'Employee not found'

    def __init__(self, employee_id: object) -> None:
        super().__init__(f'No employee found with ID: {employee_id}')


class MissingRequiredFields(ServiceError):
    code = 400
    error = 'Missing required fields'

    def __init__(self, required: list[str]) -> None:
        super().__init__(required=required)


class DuplicateEmail(ServiceError):
    code = 409
    error = 'Email already exists'

    def __init__(self, email: str) -> None:
        super().__init__(f'Employee with email {email} already exists')


class NoFieldsProvided(ServiceError):
    code = 400
    error = 'No valid fields to update'

    def __init__(self, allowed: list[str]) -> None:
        super().__init__(allowedFields=allowed)


class ValidationError(ServiceError):
    code = 400
    error = 'Validation error'
