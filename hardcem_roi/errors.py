"""
Engine errors.

Only inputs that would break the arithmetic are rejected: divisors that are
not strictly positive, and any numeric input that is not a finite number.
Everything else (unknown city, zero downtime hours, zero area inside a pricing
strategy) is reported in the result, never raised.
"""


class ROIError(Exception):
    """Base class for ROI engine errors."""


class InvalidArgumentError(ROIError, ValueError):
    """A required input is not strictly positive, or not finite."""

    def __init__(self, field: str, value, requirement: str = "greater than 0"):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be {requirement} (got {value!r})")
