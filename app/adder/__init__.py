"""
Adder - An Interactive Two-Integer Adder

This package contains:
- cli: The prompt/read/compute/print run
- tokens: Whitespace token reader over a text stream
- calculator: Request/result models and the sum
- errors: Error types and their exit codes
- config: Configuration loading
"""

from .calculator import CalculationRequest, CalculationResult, add
from .cli import run
from .config import Config
from .errors import AdderError, ArithmeticOverflowError, EndOfInputError, InputFormatError

__version__ = "0.1.0"
__all__ = [
    "run",
    "add",
    "CalculationRequest",
    "CalculationResult",
    "Config",
    "AdderError",
    "InputFormatError",
    "EndOfInputError",
    "ArithmeticOverflowError",
]
