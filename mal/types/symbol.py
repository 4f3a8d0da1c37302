"""Symbols: names that identify functions and variables.

A Symbol is a value, not a location. Two Symbols built separately from the
same text are equal and hash alike, so a table keyed by name finds an entry
whichever Symbol object the caller holds. A Symbol never equals the plain
string of its name; that keeps String and Symbol distinct variants under ``=``.
"""
from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError(f"Symbol name must be a str, got {type(name).__name__}")
        # Interned so lookups hash and compare the name cheaply
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
