# todoapp/core/exceptions.py


class TodoAppError(Exception):
    """Base class for every error raised by the todo service."""


class ConfigurationError(TodoAppError):
    """A required setting is missing or malformed."""


class DatabaseConnectionError(TodoAppError):
    """The database could not be reached at startup."""


class TodoValidationError(TodoAppError):
    """A todo payload failed validation (e.g. empty content)."""

    def __init__(self, message: str, field: str = "content"):
        super().__init__(message)
        self.message = message
        self.field = field


class StoreError(TodoAppError):
    """An unexpected datastore failure while serving a request."""
