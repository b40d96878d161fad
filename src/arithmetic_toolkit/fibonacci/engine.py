"""
Fibonacci sequence computation.

The series is indexed from 0: F(0) = 0, F(1) = 1, F(i) = F(i - 1) + F(i - 2).

Values are unsigned 64-bit integers. Past F(93) they wrap modulo 2**64
instead of growing without bound; this is a known limitation, not an error.
"""
from typing import List

from pydantic import NonNegativeInt, validate_call

from arithmetic_toolkit.common.logger import logger

# Values are kept within an unsigned 64-bit integer
UINT64_MASK: int = (1 << 64) - 1


@validate_call
def generate(n: NonNegativeInt) -> List[int]:
    """
    Compute the first ``n`` Fibonacci numbers, ``[F(0), ..., F(n - 1)]``.

    :param int n: Number of terms, zero gives an empty list

    :return: Materialized sequence of n terms
    :rtype: List[int]
    :raises pydantic.ValidationError: If n is negative or not an integer
    """
    seq: List[int] = []
    if n == 0:
        return seq
    seq.append(0)
    if n == 1:
        return seq
    seq.append(1)
    for i in range(2, n):
        seq.append((seq[i - 1] + seq[i - 2]) & UINT64_MASK)

    logger.debug(f"🌀 Generated {n} Fibonacci numbers")
    return seq


@validate_call
def nth(n: NonNegativeInt) -> int:
    """
    Compute F(n) alone by iterative accumulation.

    :param int n: Index in the sequence

    :return: The n-th Fibonacci number, wrapped to 64 bits
    :rtype: int
    :raises pydantic.ValidationError: If n is negative or not an integer
    """
    if n == 0:
        return 0
    if n == 1:
        return 1

    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, (a + b) & UINT64_MASK

    logger.debug(f"🌀 F({n}) = {b}")
    return b
