"""Exception types raised by the index engine and the ingestion layer."""


class HMPIError(Exception):
    """Base class for all package errors."""


class EmptyInputError(HMPIError, ValueError):
    """Raised when an aggregation is requested over zero results."""


class InvalidConfigurationError(HMPIError, ValueError):
    """Raised when a standards table has a missing, zero, negative or non-finite entry."""


class SampleValidationError(HMPIError, ValueError):
    """Raised when uploaded rows fail validation.

    Attributes:
        errors: One message per rejected row, e.g. ``"Row 3: Invalid latitude"``.
    """

    def __init__(self, errors: list[str], *, max_shown: int = 5):
        self.errors = list(errors)
        shown = "\n".join(self.errors[:max_shown])
        super().__init__(f"Data validation failed ({len(self.errors)} issue(s)):\n{shown}")
