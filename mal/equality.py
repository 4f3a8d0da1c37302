"""Structural equality for mal values.

Rules, in order:

1. Nil equals Nil.
2. Values of different variants are never equal.
3. Numbers, strings, symbols and booleans compare by underlying value.
4. Lists are equal when their lengths match and every pair of elements is
   equal, compared left to right and stopping at the first mismatch.
5. Functions are never equal, not even to themselves. Native callables have
   no meaningful equality, so ``=`` answers false rather than guessing.

Anything outside the value model raises MalEqualityError.
"""

from __future__ import annotations

from mal import MalValue
from mal import config
from mal.errors import MalEqualityError, MalRecursionError, MalTypeError
from mal.types.value import Variant, variant_of


def _variant(value: MalValue) -> Variant:
    try:
        return variant_of(value)
    except MalTypeError:
        raise MalEqualityError(
            f"No equals operation implemented for type: {type(value).__name__}"
        ) from None


def is_equal(a: MalValue, b: MalValue) -> bool:
    max_depth = config.get_max_depth()
    try:
        return _equal(a, b, 0, max_depth)
    except RecursionError:
        raise MalRecursionError("Equality nests deeper than the stack allows") from None


def _equal(a: MalValue, b: MalValue, depth: int, max_depth: int) -> bool:
    if depth > max_depth:
        raise MalRecursionError(f"Equality nests deeper than {max_depth} levels")
    va, vb = _variant(a), _variant(b)
    if va is Variant.NIL and vb is Variant.NIL:
        return True
    if va is not vb:
        return False

    match va:
        case Variant.NUMBER | Variant.STRING | Variant.SYMBOL | Variant.BOOLEAN:
            return a == b
        case Variant.LIST:
            if len(a) != len(b):
                return False
            for x, y in zip(a, b):
                if not _equal(x, y, depth + 1, max_depth):
                    return False
            return True
        case Variant.FUNCTION:
            return False
        case _:
            raise MalEqualityError(f"No equals operation implemented for type: {va}")
