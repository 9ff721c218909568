class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or an action is not allowed in the current state."""


class AuthenticationError(DomainError):
    """Raised when the admin PIN is wrong."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced employee, site or record does not exist."""


class DeviceError(DomainError):
    """Raised when the camera cannot be opened or read."""
