"""
Command-line entrypoints.

- ``calculator``: runs one interactive calculation on stdin/stdout
- ``fibocli N``: prints the first N Fibonacci numbers, space separated

Both are thin adapters: argument validation and output only, the computation
lives in the engines.
"""

import argparse
import io
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, NonNegativeInt, ValidationError

from arithmetic_toolkit.calculator.engine import calculate
from arithmetic_toolkit.common.logger import setup_logger
from arithmetic_toolkit.fibonacci.engine import generate

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class FibonacciCliArgs(BaseModel):
    """
    Pydantic model used to validate ``fibocli`` arguments.

    Attributes
    ----------
    n : NonNegativeInt
        Number of Fibonacci terms to print.
    log_level : str
        Logging level name.
    """

    n: NonNegativeInt
    log_level: str = Field(default="WARNING")


def _add_log_level(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity on stderr (default: WARNING)",
    )


def parse_fibonacci_args(argv: Optional[List[str]] = None) -> FibonacciCliArgs:
    """
    Parse and validate ``fibocli`` command-line arguments.

    A missing argument exits through argparse's usage error; a value that is
    not a non-negative integer exits with an ``Invalid N`` error.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``
    :return: Validated CLI arguments
    :rtype: FibonacciCliArgs
    """
    parser = argparse.ArgumentParser(
        prog="fibocli",
        description="Print the first N Fibonacci numbers",
    )
    parser.add_argument("n", metavar="N", help="Number of terms to print")
    _add_log_level(parser)

    args = parser.parse_args(argv)

    try:
        return FibonacciCliArgs(n=args.n, log_level=args.log_level)
    except ValidationError:
        parser.error(f"Invalid N: {args.n}")


def run_fibonacci(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of ``fibocli``.

    :return: Process exit code
    """
    cli_args = parse_fibonacci_args(argv)
    setup_logger(cli_args.log_level)

    seq: List[int] = generate(cli_args.n)
    # N == 0 prints nothing, not even a newline
    if seq:
        sys.stdout.write(" ".join(str(value) for value in seq) + "\n")
    return 0


def run_calculator(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of ``calculator``.

    Errors such as a division by zero are part of the calculator's output, so
    the exit code is always 0.

    :return: Process exit code
    """
    parser = argparse.ArgumentParser(
        prog="calculator",
        description="Interactive single-operation calculator",
    )
    _add_log_level(parser)
    args = parser.parse_args(argv)
    setup_logger(args.log_level)

    if isinstance(sys.stdin, io.TextIOWrapper):
        # Undecodable bytes become a non-numeric token instead of a traceback
        sys.stdin.reconfigure(errors="surrogateescape")

    calculate(sys.stdin, sys.stdout)
    # Terminate the result line for the terminal
    sys.stdout.write("\n")
    return 0
