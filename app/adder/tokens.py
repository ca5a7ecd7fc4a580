"""
Token Reader

Reads whitespace-delimited tokens from a text stream, one at a time.
A token may be anywhere on any line: "3 4" on one line supplies
two tokens just like "3\\n4".
"""

import re
from collections import deque
from typing import Deque, TextIO

from .errors import EndOfInputError, InputFormatError
from .logging_config import get_logger

logger = get_logger("tokens")

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# ASCII whitespace and the \x1c-\x1f separators; no-break spaces stay inside a token
_DELIMITER_RE = re.compile(r"[ \t\n\r\f\v\x1c-\x1f]+")


def parse_operand(token: str) -> int:
    """
    Parse a token as a signed 32-bit integer.

    Only ASCII digits with an optional sign are accepted; int()
    alone would also take "1_000" or non-ASCII digits.

    Raises:
        InputFormatError: if the token is malformed or out of range
    """
    if not _INTEGER_RE.fullmatch(token):
        raise InputFormatError(token)

    value = int(token)
    if value < INT32_MIN or value > INT32_MAX:
        raise InputFormatError(token, "out of range for a 32-bit integer")
    return value


class TokenReader:
    """
    Pulls tokens out of a stream on demand.

    Use as a context manager so the reader is released even when
    a read fails:

        with TokenReader(sys.stdin) as reader:
            a = reader.next_int()

    Args:
        stream: Any text stream (sys.stdin, io.StringIO, an open file)
        close_stream: Also close the underlying stream on close()
    """

    def __init__(self, stream: TextIO, close_stream: bool = False):
        self.stream = stream
        self.close_stream = close_stream
        self._pending: Deque[str] = deque()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def next_token(self) -> str:
        """
        Return the next token, reading more lines as needed.

        Raises:
            EndOfInputError: if the stream ends first
            InputFormatError: if the stream cannot be decoded
            ValueError: if the reader is closed
        """
        if self._closed:
            raise ValueError("read from closed TokenReader")

        while not self._pending:
            try:
                line = self.stream.readline()
            except UnicodeDecodeError as e:
                bad = e.object[e.start:e.end]
                raise InputFormatError(repr(bad), f"not valid {e.encoding} text") from e
            if not line:
                raise EndOfInputError()
            self._pending.extend(t for t in _DELIMITER_RE.split(line) if t)

        return self._pending.popleft()

    def next_int(self) -> int:
        """Read the next token and parse it as an operand."""
        token = self.next_token()
        value = parse_operand(token)
        logger.debug(f"Parsed operand {value}")
        return value

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pending.clear()
        if self.close_stream:
            self.stream.close()

    def __enter__(self) -> "TokenReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"TokenReader({state}, pending={len(self._pending)})"
