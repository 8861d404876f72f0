from .constants import INVALID_CREDENTIALS_MESSAGE


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvalidCredentials(AuthenticationError):
    """Login/password pair did not match the roster.

    The message is deliberately generic: it never says which field was wrong.
    """

    def __init__(self, message: str = INVALID_CREDENTIALS_MESSAGE):
        super().__init__(message)


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
