"""Variant classification and typed accessors for mal values.

Every value belongs to exactly one ``Variant``. Primitives never assume the
variant of an argument: they go through ``expect_number``, ``expect_string``
or ``expect_list``, which raise ``MalTypeError`` instead of letting a bad
argument surface later as a Python error.
"""

from __future__ import annotations

from enum import Enum

from mal import MalValue
from mal.errors import MalTypeError
from mal.types.function import Function
from mal.types.nil import NilType
from mal.types.symbol import Symbol


class Variant(Enum):
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    BOOLEAN = "boolean"
    NIL = "nil"
    LIST = "list"
    FUNCTION = "function"

    def __str__(self) -> str:
        return self.value


def variant_of(value: MalValue) -> Variant:
    """Return the variant of ``value``; raise MalTypeError for foreign objects."""
    # bool first: it is a subclass of int
    match value:
        case bool():
            return Variant.BOOLEAN
        case float():
            return Variant.NUMBER
        case int():
            _widen(value)
            return Variant.NUMBER
        case str():
            return Variant.STRING
        case Symbol():
            return Variant.SYMBOL
        case NilType():
            return Variant.NIL
        case list():
            return Variant.LIST
        case Function():
            return Variant.FUNCTION
        case _:
            raise MalTypeError(f"Not a mal value: {type(value).__name__}")


def _widen(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        raise MalTypeError(f"Integer of {value.bit_length()} bits is too large for a number") from None


def describe(value: MalValue) -> str:
    """Variant name of ``value``, or the Python type name for foreign objects."""
    try:
        return str(variant_of(value))
    except MalTypeError:
        return type(value).__name__


def _mismatch(op: str, position: int, expected: Variant, value: MalValue) -> MalTypeError:
    return MalTypeError(
        f"{op}: argument {position} must be a {expected}, got {describe(value)}"
    )


def expect_number(value: MalValue, op: str, position: int = 1) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch(op, position, Variant.NUMBER, value)
    return value if isinstance(value, float) else _widen(value)


def expect_string(value: MalValue, op: str, position: int = 1) -> str:
    if not isinstance(value, str):
        raise _mismatch(op, position, Variant.STRING, value)
    return value


def expect_list(value: MalValue, op: str, position: int = 1) -> list:
    if not isinstance(value, list):
        raise _mismatch(op, position, Variant.LIST, value)
    return value
