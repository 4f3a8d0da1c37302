"""Native function representation and arity checking for mal."""

from __future__ import annotations

from typing import Callable, Optional, Union

from mal import MalValue
from mal.errors import MalArityError

# None: variadic, int: exact count, (min, max): bounded range with max=None open
Arity = Union[None, int, tuple[int, Optional[int]]]


class Function:
    """A native callable taking values positionally and returning one value.

    Functions have no value equality: two Function objects compare equal
    under ``==`` only if they are the same object, and the mal ``=``
    primitive treats every Function as unequal, even to itself.
    """

    __slots__ = ("fn", "name", "arity")

    def __init__(
        self,
        fn: Callable[..., MalValue],
        name: str | None = None,
        arity: Arity = None,
    ):
        self.fn = fn
        self.name: str = name if name is not None else getattr(fn, "__name__", "anonymous")
        self.arity: Arity = arity

    def check_arity(self, count: int) -> None:
        """Raise MalArityError if ``count`` arguments are not accepted."""
        if self.arity is None:
            return
        if isinstance(self.arity, int):
            if count != self.arity:
                plural = "argument" if self.arity == 1 else "arguments"
                raise MalArityError(
                    f"{self.name} requires exactly {self.arity} {plural}, got {count}"
                )
            return
        low, high = self.arity
        if count < low:
            raise MalArityError(f"{self.name} requires at least {low} arguments, got {count}")
        if high is not None and count > high:
            raise MalArityError(f"{self.name} accepts at most {high} arguments, got {count}")

    def __call__(self, *args: MalValue) -> MalValue:
        self.check_arity(len(args))
        return self.fn(*args)

    def __repr__(self) -> str:
        return f"<Function {self.name}>"
