"""
Custom exceptions for the application.

Every exception carries a stable ``code`` that is returned to callers
alongside the human-readable message.
"""


class VocabDecksException(Exception):
    """Base exception for all Vocab Decks application exceptions."""
    code = "INTERNAL_SERVER_ERROR"


class ValidationError(VocabDecksException):
    """Raised when input passes shape validation but fails a semantic constraint."""
    code = "INVALID_ARGUMENT"


class NotFoundError(VocabDecksException):
    """Raised when a requested resource is not found."""
    code = "NOT_FOUND"


class AuthenticationError(VocabDecksException):
    """Raised when no signed-in user is present."""
    code = "UNAUTHORIZED"


class AuthorizationError(VocabDecksException):
    """Raised when the signed-in user may not access a resource."""
    code = "FORBIDDEN"
