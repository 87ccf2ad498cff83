"""Compiled URI templates.

A ``Template`` is created once from its source text and never changes,
so one instance can be expanded repeatedly, from any number of threads.
Compiled templates are not cached; callers that compile the same source
often can keep their own ``{source: Template}`` dict.
"""

from collections.abc import Callable, Mapping
from typing import Any

from uritpl._internal.types import Lookup
from uritpl.config import DEFAULT_OPTIONS, ExpandOptions
from uritpl.expansion import expand_terms
from uritpl.parsing.parser import compile_terms
from uritpl.parsing.terms import Expression, Term
from uritpl.values import ABSENT, VariableValue, to_value
from uritpl.variables import Variables

Bindings = Variables | Mapping[str, Any] | Lookup | None


class Template:
    """An immutable, compiled RFC 6570 URI template.

    Usage::

        template = Template.parse("/users/{id}{?fields*}")
        template.expand({"id": 42, "fields": {"sort": "name"}})
        # -> "/users/42?sort=name"
    """

    __slots__ = ("_source", "_terms")

    _source: str
    _terms: tuple[Term, ...]

    def __init__(self, source: str) -> None:
        terms = compile_terms(source)
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_terms", terms)

    @classmethod
    def parse(cls, source: str) -> "Template":
        """Compile *source*. Raises ``ParseError`` if it is not a valid template."""
        return cls(source)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[type["Template"], tuple[str]]:
        # Rebuild from source; slot state cannot be restored through __setattr__.
        return (type(self), (self._source,))

    @property
    def source(self) -> str:
        return self._source

    @property
    def terms(self) -> tuple[Term, ...]:
        return self._terms

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Lookup names referenced by this template, in order of first use."""
        names: dict[str, None] = {}
        for term in self._terms:
            if isinstance(term, Expression):
                for varspec in term.varspecs:
                    names.setdefault(varspec.varname, None)
        return tuple(names)

    def expand(self, variables: Bindings = None, options: ExpandOptions | None = None) -> str:
        """Render this template against *variables*.

        *variables* may be a ``Variables``, a plain mapping, a callable
        ``name -> value``, or None for no bindings at all. Names without a
        binding expand to nothing unless *options* disallow variable misses.

        Raises ``ModifierConflictError`` if a ``{name:N}`` prefix meets a
        list or map value.
        """
        return expand_terms(self._terms, _as_lookup(variables), options or DEFAULT_OPTIONS)

    def __str__(self) -> str:
        return self._source

    def __repr__(self) -> str:
        return f"Template({self._source!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(self._source)


def _as_lookup(variables: Bindings) -> Callable[[str], VariableValue]:
    """Normalize every accepted binding shape into a ``name -> VariableValue`` function."""
    if variables is None:
        return lambda _name: ABSENT
    if isinstance(variables, Variables):
        return variables
    if isinstance(variables, Mapping):
        return lambda name: to_value(variables.get(name))
    if callable(variables):
        return lambda name: to_value(variables(name))
    msg = f"Cannot expand with {type(variables).__name__}; expected a mapping or a callable"
    raise TypeError(msg)


def compile(source: str) -> Template:  # noqa: A001
    """Compile *source* into a ``Template``. Raises ``ParseError`` on invalid input."""
    return Template(source)


def expand(
    source: str,
    variables: Bindings = None,
    options: ExpandOptions | None = None,
) -> str:
    """Compile *source* and expand it once."""
    return Template(source).expand(variables, options)
