"""Expansion engine: renders compiled terms against variable bindings.

Literals are copied verbatim. Each expression formats its variables into
units, then emits the operator prefix once followed by the units joined
with the operator delimiter. An expression whose variables are all
undefined (absent, empty list, empty map) emits nothing at all.

Raises ``ModifierConflictError`` when a prefix modifier meets a list or
map, and ``MissingVariableError`` for unbound variables in strict mode.
No partial output is returned in either case.
"""

import logging
from collections.abc import Callable, Iterable

from uritpl.config import DEFAULT_OPTIONS, ExpandOptions
from uritpl.errors import MissingVariableError, ModifierConflictError
from uritpl.operators import OPERATORS, Operator
from uritpl.parsing.terms import Expression, Literal, Term, Varspec
from uritpl.values import Absent, AssocMap, ListValue, Scalar, VariableValue

logger = logging.getLogger("uritpl.expansion")


def expand_terms(
    terms: Iterable[Term],
    lookup: Callable[[str], VariableValue],
    options: ExpandOptions = DEFAULT_OPTIONS,
) -> str:
    """Concatenate the expansion of every term, in order."""
    out: list[str] = []
    for term in terms:
        match term:
            case Literal(text=text):
                out.append(text)
            case Expression():
                out.append(expand_expression(term, lookup, options))
    return "".join(out)


def expand_expression(
    expression: Expression,
    lookup: Callable[[str], VariableValue],
    options: ExpandOptions = DEFAULT_OPTIONS,
) -> str:
    operator = OPERATORS[expression.operator]
    units: list[str] = []
    for varspec in expression.varspecs:
        value = lookup(varspec.varname)
        if isinstance(value, Absent) and not options.allow_variable_miss:
            logger.debug("Unbound variable %r in strict expansion", varspec.varname)
            raise MissingVariableError(varspec.varname)
        units.extend(format_variable(operator, varspec, value))

    if not units:
        return ""
    return operator.prefix + operator.delimiter.join(units)


def format_variable(operator: Operator, varspec: Varspec, value: VariableValue) -> list[str]:
    """Format one variable into zero or more units for *operator*."""
    match value:
        case Absent():
            return []

        case Scalar(value=text):
            if varspec.prefix_length is not None:
                text = text[: varspec.prefix_length]
            return [_unit(operator, varspec.decoded_name, text)]

        case ListValue(items=items):
            if varspec.prefix_length is not None:
                raise ModifierConflictError(varspec.varname, "list")
            if value.is_empty:
                return []
            if varspec.exploded:
                return [_unit(operator, varspec.decoded_name, item) for item in items]
            joined = ",".join(operator.encode_value(item) for item in items)
            return [operator.join(False, operator.encode_name(varspec.decoded_name), joined)]

        case AssocMap(entries=entries):
            if varspec.prefix_length is not None:
                raise ModifierConflictError(varspec.varname, "map")
            if value.is_empty:
                return []
            if varspec.exploded:
                return [
                    operator.join(True, operator.encode_name(key), operator.encode_value(val))
                    for key, val in entries
                ]
            joined = ",".join(
                f"{operator.encode_value(key)},{operator.encode_value(val)}" for key, val in entries
            )
            # Non-exploded maps name themselves with the raw token, not the decoded name.
            return [operator.join(False, operator.encode_name(varspec.varname), joined)]


def _unit(operator: Operator, name: str, value: str) -> str:
    return operator.join(False, operator.encode_name(name), operator.encode_value(value))
