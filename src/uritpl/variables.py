"""Variable bindings for template expansion.

``Variables`` is an insertion-ordered set of named ``VariableValue``s. It
is callable, so an instance can be handed straight to ``Template.expand``
as its lookup function.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Self
from urllib.parse import parse_qs

from uritpl._internal.multimap import MultiValueMapping
from uritpl.values import ABSENT, AssocMap, ListValue, Scalar, VariableValue, to_value


class Variables:
    """Named values to expand a template with.

    Attributes:
        _data: Variable name -> bound value, in insertion order.

    Values are converted with ``to_value`` on the way in, so plain
    strings, lists and dicts can be bound directly::

        variables = Variables().set("id", 42).set("tags", ["a", "b"])
        template.expand(variables)
    """

    _data: dict[str, VariableValue]

    __slots__ = ("_data",)

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._data = {}
        if values:
            self.add_all(values)

    @classmethod
    def from_query_string(cls, query_string: bytes | str) -> Self:
        """Build bindings from an urlencoded query string.

        A key that appears once binds a scalar; a repeated key binds a list.
        """
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        parsed = parse_qs(query_string, keep_blank_values=True)
        variables = cls()
        for name, values in parsed.items():
            variables._bind_multi(name, values)
        return variables

    @classmethod
    def from_multimap(cls, source: MultiValueMapping) -> Self:
        """Build bindings from a multi-valued mapping (query params, form data).

        Uses the same one-value/many-values rule as ``from_query_string``.
        """
        variables = cls()
        for name in source:
            variables._bind_multi(name, source.get_list(name))
        return variables

    def _bind_multi(self, name: str, values: list[str]) -> None:
        if len(values) == 1:
            self._data[name] = Scalar(values[0])
        else:
            self._data[name] = ListValue(tuple(values))

    def set(self, name: str, value: Any) -> Self:
        """Bind *name* to *value*. Binding ``None`` leaves *name* undefined."""
        if value is None:
            self._data.pop(name, None)
        else:
            self._data[name] = to_value(value)
        return self

    def add_all(self, values: Mapping[str, Any]) -> Self:
        for name, value in values.items():
            self.set(name, value)
        return self

    def remove(self, name: str) -> Self:
        self._data.pop(name, None)
        return self

    def get(self, name: str) -> VariableValue:
        """Return the value bound to *name*, or ``ABSENT``."""
        return self._data.get(name, ABSENT)

    def get_single(self, name: str) -> str | None:
        """Return the scalar bound to *name*, or None if it is not a scalar."""
        value = self._data.get(name)
        if isinstance(value, Scalar):
            return value.value
        return None

    def get_list(self, name: str) -> list[str]:
        """Return the list bound to *name*; a scalar reads as a one-item list."""
        value = self._data.get(name)
        if isinstance(value, ListValue):
            return list(value.items)
        if isinstance(value, Scalar):
            return [value.value]
        return []

    def get_map(self, name: str) -> dict[str, str]:
        value = self._data.get(name)
        if isinstance(value, AssocMap):
            return value.as_dict()
        return {}

    def names(self) -> list[str]:
        return list(self._data)

    def __call__(self, name: str) -> VariableValue:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"Variables({{{items}}})"
