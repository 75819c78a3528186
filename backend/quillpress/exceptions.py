"""Domain exceptions raised by services and mapped to HTTP responses."""


class QuillPressError(Exception):
    """Base exception for Quill Press errors."""

    status_code = 500


class ValidationError(QuillPressError):
    """Raised when a required field is missing or input is malformed."""

    status_code = 422


class NotFoundError(QuillPressError):
    """Raised when an id or slug does not match any record."""

    status_code = 404


class Unauthorized(QuillPressError):
    """Raised when no valid credential was presented."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class Forbidden(QuillPressError):
    """Raised when the credential is valid but the role is insufficient."""

    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class ConflictError(QuillPressError):
    """Raised when a write loses a storage uniqueness constraint."""

    status_code = 409


class InfrastructureError(QuillPressError):
    """Raised when the storage or identity collaborator fails."""

    status_code = 502


class ConfigurationError(QuillPressError):
    """Raised when required settings are missing."""

    pass
