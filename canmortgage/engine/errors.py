"""Errors raised by the calculation engine.

Every precondition is checked before any arithmetic runs; nothing here is
logged or retried.
"""


class InvalidInputError(ValueError):
    """A caller-supplied value is outside the domain the engine accepts."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class DegenerateAmortizationError(InvalidInputError):
    """The payment does not cover the first month's interest.

    Computing through would grow the balance instead of retiring it.
    """
