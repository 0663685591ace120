class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormat(ValidationError):
    """Raised when a clock time is not a valid 24-hour HH:MM string."""


class InvalidBreakTime(ValidationError):
    """Raised when break minutes fall outside the allowed range."""


class InvalidMultiplier(ValidationError):
    """Raised when an overtime multiplier falls outside the allowed range."""


class InvalidRate(ValidationError):
    """Raised when an hourly rate is negative (or not positive where required)."""


class MissingFieldError(ValidationError):
    """Raised when a required form field is absent or blank."""


class NotFoundError(DomainError):
    """Raised when a project or work entry does not exist for the owner."""


class SpreadsheetFormatError(DomainError):
    """Raised when an uploaded timesheet cannot be read or lacks columns."""


class ProjectInUseError(DomainError):
    """Raised when deleting a project that still has work entries."""
