# Core type aliases for the mal data model.
# Values are plain Python objects: float for numbers, str for strings, bool,
# list for lists, plus the Symbol, Nil and Function types in mal.types.
# The alias resolves to `Any`; mal.types.value.variant_of is the authority on
# which objects are actually values.

from typing import Any, Callable

# Runtime value alias
MalValue = Any

# Reader contract: parse source text, return the first value read
ReaderFn = Callable[[str], MalValue]
