"""Render mal values as text.

Two modes share one entry point, ``pr_str(value, print_readably)``:

- readable (``print_readably=True``): output the reader can parse back into
  an equal value. Strings are quoted and escaped.
- display (``print_readably=False``): output meant for people. Strings are
  emitted as-is.

Atoms other than strings render the same in both modes.
"""

from __future__ import annotations

from typing import Iterable

from mal import MalValue
from mal import config
from mal.errors import MalRecursionError, MalTypeError
from mal.types.value import Variant, variant_of

_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n"})


def format_number(value: float) -> str:
    """Shortest round-trippable decimal; integral values drop the trailing .0"""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def escape_string(text: str) -> str:
    return '"' + text.translate(_ESCAPES) + '"'


def pr_str(value: MalValue, print_readably: bool = True) -> str:
    max_depth = config.get_max_depth()
    try:
        return _render(value, print_readably, 0, max_depth)
    except RecursionError:
        # MAL_MAX_DEPTH set above what the interpreter stack allows
        raise MalRecursionError("Value nests deeper than the stack allows") from None


def render_readable(value: MalValue) -> str:
    return pr_str(value, True)


def render_display(value: MalValue) -> str:
    return pr_str(value, False)


def pr_seq(values: Iterable[MalValue], print_readably: bool, separator: str) -> str:
    """Render each value in the given mode and join with ``separator``."""
    return separator.join(pr_str(v, print_readably) for v in values)


def _render(value: MalValue, readably: bool, depth: int, max_depth: int) -> str:
    if depth > max_depth:
        raise MalRecursionError(f"Value nests deeper than {max_depth} levels")
    try:
        variant = variant_of(value)
    except MalTypeError:
        raise MalTypeError(f"Cannot print {type(value).__name__}") from None

    match variant:
        case Variant.NUMBER:
            return format_number(value)
        case Variant.STRING:
            return escape_string(value) if readably else value
        case Variant.SYMBOL:
            return value.name
        case Variant.BOOLEAN:
            return "true" if value else "false"
        case Variant.NIL:
            return "nil"
        case Variant.LIST:
            parts = []
            for v in value:
                parts.append(_render(v, readably, depth + 1, max_depth))
            return "(" + " ".join(parts) + ")"
        case Variant.FUNCTION:
            return "#<function>"
