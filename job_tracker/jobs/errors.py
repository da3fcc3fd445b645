"""Domain errors raised by the jobs service and repository.

``BadInputError`` and ``NotFoundError`` are the only errors callers are
expected to tell apart; anything else (SQLAlchemy errors, timeouts,
cancellation) is an infrastructure failure and propagates untouched.
"""


class JobsError(Exception):
    """Base class for client-correctable job errors."""

    code = "INTERNAL"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)
        self.message = message or self.code


class BadInputError(JobsError):
    """Caller-supplied data violates a constraint."""

    code = "BAD_INPUT"


class NotFoundError(JobsError):
    """The operation targeted a job id that does not exist."""

    code = "NOT_FOUND"


class SeedError(Exception):
    """Raised when demo seeding stops on a failed insert.

    Attributes:
        inserted: Number of rows inserted before the failure.
    """

    def __init__(self, inserted: int, original_error: Exception | None = None):
        super().__init__(f"Demo seeding failed after {inserted} inserted rows")
        self.inserted = inserted
        self.original_error = original_error
