"""The Nil value, mal's single "no value" marker.

``prn`` and ``println`` return it. Nil is falsy and prints as ``nil``. It is
equal to any other Nil and to nothing else. In particular it is not equal to
the empty list or to ``false``, since those are different variants.
"""
from __future__ import annotations


class NilType:
    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __reduce__(self):
        # copies and unpickled instances collapse back to the singleton
        return "Nil"


Nil = NilType()
