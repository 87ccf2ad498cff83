"""Shared type aliases used across uritpl modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Allowed-character predicate over an integer code point
AllowedSet: TypeAlias = Callable[[int], bool]

# Variable lookup: receives a variable name, returns its bound value
# (a VariableValue or plain Python data, None when unbound)
Lookup: TypeAlias = Callable[[str], Any]
