# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Optim.

User input errors and programmer errors are not raised by a session. They are
recorded (the first one wins) and reported when the session is finished.
Only construction problems, such as a negative argument count, are raised.

Exception Hierarchy:
- OptimError
    ├── ArgumentError
    │   ├── MissingArgumentError
    │   ├── DuplicateFlagError
    │   ├── AlreadyConsumedError
    │   ├── UnexpectedValueError
    │   ├── InvalidNumberError
    │   └── UnusedArgumentError
    ├── OptimUsageError
    │   └── SessionFinishedError
    ├── InternalError
    ├── ErrorFormatError
    ├── InvalidArgumentError
    └── AllocationFailedError
"""


class OptimError(Exception):
    """Base exception for Optim."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ArgumentError(OptimError):
    """The command line given by the user is invalid."""


class MissingArgumentError(ArgumentError):
    """A value-taking option is not followed by its value."""


class DuplicateFlagError(ArgumentError):
    """A value-taking short option appears twice in the same cluster."""


class AlreadyConsumedError(ArgumentError):
    """A short option was already taken out of its cluster."""


class UnexpectedValueError(ArgumentError):
    """A flag was given an inline `--name=value`."""


class InvalidNumberError(ArgumentError):
    """An option value could not be parsed as an integer."""


class UnusedArgumentError(ArgumentError):
    """A token was never claimed by any declaration."""


class OptimUsageError(OptimError):
    """The library was called in a way that indicates a bug in the caller."""


class SessionFinishedError(OptimUsageError):
    """A session method was called after `finish()`."""


class InternalError(OptimError):
    """An internal invariant was violated."""


class ErrorFormatError(OptimError):
    """A printf-style message could not be formatted."""

    def __init__(self, message: str = "Internal optim error: unable to write error string"):
        super().__init__(message)


class InvalidArgumentError(OptimError, ValueError):
    """A session was constructed with invalid parameters."""


class AllocationFailedError(OptimError, MemoryError):
    """Internal storage for a session could not be acquired."""
