"""
Calculator

Request/result models and the sum itself.
"""

from typing import Literal

from pydantic import BaseModel, Field

from .errors import ArithmeticOverflowError
from .logging_config import get_logger
from .tokens import INT32_MAX, INT32_MIN

logger = get_logger("calculator")

OverflowPolicy = Literal["reject", "wrap"]
OVERFLOW_POLICIES = ("reject", "wrap")


class CalculationRequest(BaseModel):
    """The two operands of a single run."""
    a: int = Field(ge=INT32_MIN, le=INT32_MAX)
    b: int = Field(ge=INT32_MIN, le=INT32_MAX)


class CalculationResult(BaseModel):
    """A finished sum, ready to print."""
    a: int
    b: int
    result: int

    def format_line(self) -> str:
        return f"Result: {self.a} + {self.b} = {self.result}"


def wrap_int32(value: int) -> int:
    """Reduce an integer to its two's complement 32-bit value."""
    return (value - INT32_MIN) % 2 ** 32 + INT32_MIN


def add(request: CalculationRequest, policy: OverflowPolicy = "reject") -> CalculationResult:
    """
    Add the two operands of a request.

    Args:
        request: Operands, both already in 32-bit range
        policy: "reject" raises on overflow, "wrap" wraps around

    Returns:
        CalculationResult holding the operands and their sum

    Raises:
        ArithmeticOverflowError: if the sum is out of range and policy is "reject"
    """
    if policy not in OVERFLOW_POLICIES:
        raise ValueError(f"Unknown overflow policy: {policy}")

    total = request.a + request.b
    if INT32_MIN <= total <= INT32_MAX:
        return CalculationResult(a=request.a, b=request.b, result=total)

    if policy == "reject":
        raise ArithmeticOverflowError(request.a, request.b)

    wrapped = wrap_int32(total)
    logger.debug(f"Sum {total} wrapped to {wrapped}")
    return CalculationResult(a=request.a, b=request.b, result=wrapped)
