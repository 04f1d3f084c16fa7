"""Application-level exception types for pantheon."""

from __future__ import annotations


class PantheonError(Exception):
    """Base exception for pantheon."""


class PreconditionError(PantheonError):
    """Base exception for path preconditions checked before any child is spawned."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class NotAbsolutePathError(PreconditionError):
    """Raised when a path must be absolute but is relative."""


class PathMissingError(PreconditionError):
    """Raised when a path must exist but does not."""


class PathAlreadyExistsError(PreconditionError):
    """Raised when a path must not exist but does."""


class ConfigurationError(PantheonError):
    """Base exception for schema and invocation mismatches."""


class UnsupportedFlagTypeError(ConfigurationError):
    """Raised when a flag kind or value cannot be rendered back into tokens."""


class InvalidInvocationError(ConfigurationError):
    """Raised when an invocation does not fit the command it names."""


class OrchestrationError(PantheonError):
    """Base exception for child process spawn and wait failures."""


class ExecutableResolutionError(OrchestrationError):
    """Raised when the running executable cannot be located."""


class SpawnError(OrchestrationError):
    """Raised when the child process cannot be started."""
