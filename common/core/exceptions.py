class AppException(Exception):
    """Base application exception."""

    pass


class NotFoundError(AppException):
    """Resource not found exception."""

    pass


class ConflictError(AppException):
    """More than one resource matched where exactly one was expected."""

    pass


class ValidationError(AppException):
    """Validation error exception."""

    pass


class StorageError(AppException):
    """Document store operation error exception."""

    pass


class PaymentProviderError(AppException):
    """Payment provider call failed."""

    pass


class ApiError(AppException):
    """Error returned to the HTTP caller as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
