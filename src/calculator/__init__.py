"""Calculator - four arithmetic operations over pairs of numbers."""

import logging

from calculator.errors import CalculatorError, ConfigError, DivisionByZero
from calculator.operations import add, divide, multiply, subtract

__version__ = "0.1.0"

# Library code never configures logging on import
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalculatorError",
    "ConfigError",
    "DivisionByZero",
    "add",
    "divide",
    "multiply",
    "subtract",
]
