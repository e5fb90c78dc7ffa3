"""
Domain Errors

Exceptions raised by the services and translated to HTTP responses by the
controllers.
"""


class WordletError(Exception):
    """Base class for all domain/service errors."""


class StorageError(WordletError):
    """The game store could not complete a read or write."""


class ValidationError(WordletError):
    """Request body failed validation before reaching the game logic."""
