"""Variable values bound at expansion time.

A closed union of four frozen variants. The expansion engine matches on
all four, so there is no "unsupported type" path at expansion time;
plain Python data is converted up front by ``to_value``.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Absent:
    """An undefined variable. Contributes nothing to the expansion."""

    @property
    def is_empty(self) -> bool:
        return True


ABSENT = Absent()


@dataclass(frozen=True, slots=True)
class Scalar:
    """A single string value. The empty string is still a defined value."""

    value: str

    @property
    def is_empty(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class ListValue:
    """An ordered list of strings."""

    items: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True, slots=True)
class AssocMap:
    """An ordered mapping of string keys to string values.

    Stored as a tuple of pairs so the variant stays hashable and keeps
    the caller's iteration order.
    """

    entries: tuple[tuple[str, str], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> "AssocMap":
        """Stringify *mapping*, dropping entries whose value is None."""
        return cls(
            tuple((_stringify(k), _stringify(v)) for k, v in mapping.items() if v is not None)
        )

    def as_dict(self) -> dict[str, str]:
        return dict(self.entries)


VariableValue: TypeAlias = Absent | Scalar | ListValue | AssocMap


def _stringify(obj: Any) -> str:
    if isinstance(obj, bool):
        return "true" if obj else "false"
    return str(obj)


def to_value(obj: Any) -> VariableValue:
    """Convert plain Python data into a ``VariableValue``.

    ``None`` is absent; ``str``, ``bool`` and numbers are scalars; any
    mapping becomes an ``AssocMap``; any other iterable becomes a
    ``ListValue``. Members of lists and maps are stringified, and ``None``
    members are undefined and dropped, so a map whose values are all
    ``None`` expands like an empty one.

    Raises ``TypeError`` for anything else.
    """
    match obj:
        case None:
            return ABSENT
        case Absent() | Scalar() | ListValue() | AssocMap():
            return obj
        case str():
            return Scalar(obj)
        case bool() | int() | float():
            return Scalar(_stringify(obj))
        case Mapping():
            return AssocMap.from_mapping(obj)
        case bytes() | bytearray():
            msg = f"Cannot bind bytes as a template variable; decode it first: {obj!r}"
            raise TypeError(msg)
        case Iterable():
            return ListValue(tuple(_stringify(item) for item in obj if item is not None))
    msg = f"Cannot bind {type(obj).__name__} as a template variable"
    raise TypeError(msg)
