"""
Error Types

Every way a run can fail. Each error carries the exit status
the process should terminate with.
"""


class AdderError(Exception):
    """Base exception for adder failures."""
    exit_code: int = 1


class InputFormatError(AdderError):
    """Raised when a token is not a valid 32-bit integer."""
    exit_code = 1

    def __init__(self, token: str, reason: str = "not an integer"):
        self.token = token
        self.reason = reason
        super().__init__(f"invalid integer {token!r}: {reason}")


class EndOfInputError(AdderError):
    """Raised when input runs out before an operand is read."""
    exit_code = 2

    def __init__(self, message: str = "unexpected end of input"):
        super().__init__(message)


class ArithmeticOverflowError(AdderError):
    """Raised when a sum leaves the 32-bit range and wrapping is disabled."""
    exit_code = 3

    def __init__(self, a: int, b: int):
        self.a = a
        self.b = b
        super().__init__(f"{a} + {b} overflows a 32-bit integer")
