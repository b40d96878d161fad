"""Tokenize calculator input streams and parse operands without raising."""
from collections import deque
import math
import operator
from typing import Callable, Deque, Optional, TextIO

from arithmetic_toolkit.common.models import ParseResult


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]

# Mapping of supported operator symbols to their functions
OPERATORS: dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


class TokenReader:
    """
    Read whitespace-delimited tokens from a text stream, one line at a time.

    Lines are only pulled from the stream when the buffered tokens run out, so a
    caller can write a prompt before the line that answers it is consumed.
    Whitespace, including newlines, between tokens is insignificant.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._pending: Deque[str] = deque()

    def next_token(self) -> Optional[str]:
        """
        Return the next token, blocking on the stream if needed.

        :return: Next token, or None once the stream is exhausted
        :rtype: Optional[str]
        """
        while not self._pending:
            line: str = self.stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()


def parse_number(token: Optional[str]) -> ParseResult:
    """
    Parse a token as a floating-point operand.

    Only finite decimal literals are accepted: ``nan``, ``inf`` and
    underscore-grouped digits are rejected even though ``float()`` takes them.

    :param Optional[str] token: Raw token, None when the input ended

    :return: ParseResult holding the value, or the reason parsing failed
    :rtype: ParseResult
    """
    if token is None:
        return ParseResult(reason="Unexpected end of input")
    if "_" in token:
        return ParseResult(token=token, reason=f"Not a number: {token!r}")
    try:
        value = float(token)
    except ValueError:
        return ParseResult(token=token, reason=f"Not a number: {token!r}")
    if not math.isfinite(value):
        return ParseResult(token=token, reason=f"Not a finite number: {token!r}")
    return ParseResult(token=token, value=value)
