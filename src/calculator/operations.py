"""Arithmetic operations over two operands."""

from calculator.errors import DivisionByZero
from calculator.log import get_logger

logger = get_logger(__name__)


def add(a: float, b: float) -> float:
    """Add two numbers."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Subtract b from a."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Multiply a by b."""
    return a * b


def divide(a: float, b: float) -> float:
    """Divide a by b.

    Raises:
        DivisionByZero: If b is zero.
    """
    if b == 0:
        logger.debug("Rejected division of %r by zero", a)
        raise DivisionByZero(a)
    return a / b
