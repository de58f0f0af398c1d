"""Errors raised by the calculator package."""

from pathlib import Path


class CalculatorError(Exception):
    """Base class for calculator errors."""


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Raised when the divisor of a division is zero.

    Also a ZeroDivisionError, so callers catching the builtin still work.
    """

    message = "Cannot divide by zero"

    def __init__(self, dividend: float | None = None):
        self.dividend = dividend
        super().__init__(self.message)


class ConfigError(CalculatorError):
    """Raised when a config file cannot be parsed or validated."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")
