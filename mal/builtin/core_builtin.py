"""Built-in functions for the mal core namespace.

This module defines arithmetic, numeric comparison, list predicates, the
printing builtins, file reading, read-string and structural equality, and the
``make_namespace`` factory that packages them as a read-only mapping from
operator name to Function.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from mal import MalValue, ReaderFn
from mal import config
from mal.equality import is_equal
from mal.errors import (
    MalError,
    MalIOError,
    MalNameError,
    MalReaderError,
    MalSyntaxError,
    MalZeroDivisionError,
)
from mal.printer import pr_seq
from mal.types.function import Function
from mal.types.nil import Nil
from mal.types.symbol import Symbol
from mal.types.value import expect_number, expect_string

logger = logging.getLogger(__name__)

Namespace = Mapping[str, Function]


# -------------------------------
# Arithmetic
# -------------------------------
def add(a: MalValue, b: MalValue) -> float:
    return expect_number(a, "+", 1) + expect_number(b, "+", 2)


def sub(a: MalValue, b: MalValue) -> float:
    return expect_number(a, "-", 1) - expect_number(b, "-", 2)


def mul(a: MalValue, b: MalValue) -> float:
    return expect_number(a, "*", 1) * expect_number(b, "*", 2)


def div(a: MalValue, b: MalValue) -> float:
    """Divide a by b; a zero divisor is an error, never inf or nan."""
    n = expect_number(a, "/", 1)
    d = expect_number(b, "/", 2)
    if d == 0:
        raise MalZeroDivisionError("Division by zero")
    return n / d


# -------------------------------
# Comparison
# -------------------------------
def lt(a: MalValue, b: MalValue) -> bool:
    return expect_number(a, "<", 1) < expect_number(b, "<", 2)


def gt(a: MalValue, b: MalValue) -> bool:
    return expect_number(a, ">", 1) > expect_number(b, ">", 2)


def lte(a: MalValue, b: MalValue) -> bool:
    return expect_number(a, "<=", 1) <= expect_number(b, "<=", 2)


def gte(a: MalValue, b: MalValue) -> bool:
    return expect_number(a, ">=", 1) >= expect_number(b, ">=", 2)


def equals(a: MalValue, b: MalValue) -> bool:
    return is_equal(a, b)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(*args: MalValue) -> list[MalValue]:
    """Construct a new list from the provided arguments."""
    return list(args)


def is_list(x: MalValue) -> bool:
    return isinstance(x, list)


def is_empty(x: MalValue) -> bool:
    """True only for a list with no elements; anything else counts as non-empty."""
    return isinstance(x, list) and not x


def count(x: MalValue) -> float:
    """Length of a list as a number; 0 for every other value."""
    if isinstance(x, list):
        return float(len(x))
    return 0.0


# -------------------------------
# Strings and printing
# -------------------------------
def pr_str_builtin(*args: MalValue) -> str:
    return pr_seq(args, True, " ")


def str_builtin(*args: MalValue) -> str:
    return pr_seq(args, False, "")


def prn(*args: MalValue) -> MalValue:
    """Print readable representations space-separated with a newline; returns Nil."""
    print(pr_seq(args, True, " "))
    return Nil


def println(*args: MalValue) -> MalValue:
    """Print display representations space-separated with a newline; returns Nil."""
    print(pr_seq(args, False, " "))
    return Nil


# -------------------------------
# Reading
# -------------------------------
def slurp(path: MalValue) -> str:
    """Return the full contents of the named file as a string."""
    filename = expect_string(path, "slurp")
    encoding = config.get_slurp_encoding()
    try:
        # newline="" keeps \r\n and \r as they are on disk
        with open(filename, encoding=encoding, newline="") as f:
            data = f.read()
    except (OSError, ValueError, LookupError) as e:
        raise MalIOError(f"slurp: cannot read {filename!r}: {e}") from e
    logger.debug("slurp read %d characters from %s", len(data), filename)
    return data


def _read_string(reader: ReaderFn | None):
    def read_string(source: MalValue) -> MalValue:
        """Parse source text with the installed reader and return the first value."""
        text = expect_string(source, "read-string")
        if reader is None:
            raise MalReaderError("read-string: no reader installed")
        logger.debug("read-string delegating %d characters to reader", len(text))
        try:
            return reader(text)
        except MalError:
            raise
        except Exception as e:
            raise MalSyntaxError(f"read-string: {e}") from e

    return read_string


# -------------------------------
# Registration
# -------------------------------
def make_namespace(reader: ReaderFn | None = None) -> Namespace:
    """Build the read-only table of core functions, keyed by operator name.

    ``reader`` implements the reader contract used by ``read-string``. The
    returned mapping cannot be modified; build a new one to change readers.
    """
    entries = [
        ("+", add, 2),
        ("-", sub, 2),
        ("*", mul, 2),
        ("/", div, 2),
        ("list", list_builtin, None),
        ("list?", is_list, 1),
        ("empty?", is_empty, 1),
        ("count", count, 1),
        ("<", lt, 2),
        (">", gt, 2),
        ("<=", lte, 2),
        (">=", gte, 2),
        ("pr-str", pr_str_builtin, None),
        ("str", str_builtin, None),
        ("prn", prn, None),
        ("println", println, None),
        ("read-string", _read_string(reader), 1),
        ("slurp", slurp, 1),
        ("=", equals, 2),
    ]
    table = {name: Function(fn, name=name, arity=arity) for name, fn, arity in entries}
    logger.debug("built core namespace with %d functions", len(table))
    return MappingProxyType(table)


def lookup(namespace: Namespace, name: str | Symbol) -> Function:
    """Find a function by name; Symbols resolve by their name, never by identity."""
    key = name.name if isinstance(name, Symbol) else name
    try:
        return namespace[key]
    except KeyError:
        raise MalNameError(f"Unknown function: {key}") from None
