from enum import Enum


class ErrorKind(str, Enum):
    null_input = "null_input"
    invalid_argument = "invalid_argument"
    conflict = "conflict"
    store_failure = "store_failure"


class ApplicationError(Exception):
    """Base application-layer error, independent from transport concerns.

    Every subclass pins a `kind`; callers branch on the kind rather than on
    the exception subtype.
    """

    kind: ErrorKind


class NullInputError(ApplicationError):
    """Raised when a required input object is entirely absent."""

    kind = ErrorKind.null_input


class ValidationError(ApplicationError):
    """Raised when application-level validation fails.

    `errors` holds every failing check in a fixed order; the message joins them.
    """

    kind = ErrorKind.invalid_argument

    def __init__(self, *errors: str) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


class ConflictError(ApplicationError):
    """Raised when a uniqueness or state conflict occurs."""

    kind = ErrorKind.conflict


class StoreFailureError(ApplicationError):
    """Raised when the record store fails for reasons outside validation."""

    kind = ErrorKind.store_failure
