"""RFC 6570 expression operators.

The nine operators differ only in a handful of parameters, so each one is
a frozen ``Operator`` descriptor rather than a subclass. The trigger
table is built once at import time and never mutated afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from uritpl._internal.chars import is_unreserved, is_unreserved_or_reserved
from uritpl._internal.percent import encode_string
from uritpl._internal.types import AllowedSet


class OperatorId(Enum):
    SIMPLE = "simple"
    RESERVED = "reserved"
    FRAGMENT = "fragment"
    LABEL = "label"
    PATH_SEGMENT = "path_segment"
    PATH_PARAM = "path_param"
    QUERY_FORM = "query_form"
    QUERY_FORM_CONTINUATION = "query_form_continuation"
    FUTURE = "future"


class JoinMode(Enum):
    """How a formatted ``(name, value)`` unit is rendered.

    CAT1:       bare ``value``; ``name=value`` only for exploded map entries
    CAT2:       always ``name=value``
    PATH_STYLE: like CAT2, but a bare ``name`` when the value is empty
    """

    CAT1 = "cat1"
    CAT2 = "cat2"
    PATH_STYLE = "path_style"


@dataclass(frozen=True, slots=True)
class Operator:
    """Immutable descriptor for one expression operator."""

    id: OperatorId
    triggers: str
    prefix: str
    delimiter: str
    join_mode: JoinMode
    allowed: AllowedSet
    allow_pct_triplets: bool = False

    def join(self, entry: bool, name: str, value: str) -> str:
        """Render one formatted unit.

        *entry* is true for the entries of an exploded map, which render
        as ``name=value`` even under CAT1 operators.
        """
        match self.join_mode:
            case JoinMode.CAT1:
                return f"{name}={value}" if entry else value
            case JoinMode.PATH_STYLE:
                if not entry and not value:
                    return name
                return f"{name}={value}"
            case JoinMode.CAT2:
                return f"{name}={value}"

    def encode_name(self, name: str) -> str:
        return encode_string(name, is_unreserved)

    def encode_value(self, value: str) -> str:
        return encode_string(value, self.allowed, allow_pct_triplets=self.allow_pct_triplets)


OPERATORS: MappingProxyType[OperatorId, Operator] = MappingProxyType(
    {
        op.id: op
        for op in (
            Operator(OperatorId.SIMPLE, "", "", ",", JoinMode.CAT1, is_unreserved),
            Operator(
                OperatorId.RESERVED,
                "+",
                "",
                ",",
                JoinMode.CAT1,
                is_unreserved_or_reserved,
                allow_pct_triplets=True,
            ),
            Operator(
                OperatorId.FRAGMENT,
                "#",
                "#",
                ",",
                JoinMode.CAT1,
                is_unreserved_or_reserved,
                allow_pct_triplets=True,
            ),
            Operator(OperatorId.LABEL, ".", ".", ".", JoinMode.CAT1, is_unreserved),
            Operator(OperatorId.PATH_SEGMENT, "/", "/", "/", JoinMode.CAT1, is_unreserved),
            Operator(OperatorId.PATH_PARAM, ";", ";", ";", JoinMode.PATH_STYLE, is_unreserved),
            Operator(OperatorId.QUERY_FORM, "?", "?", "&", JoinMode.CAT2, is_unreserved),
            Operator(
                OperatorId.QUERY_FORM_CONTINUATION, "&", "&", "&", JoinMode.CAT2, is_unreserved
            ),
            # Reserved by RFC 6570 for future extensions; templates using it never compile.
            Operator(OperatorId.FUTURE, "=,!@|", "", "", JoinMode.CAT1, is_unreserved_or_reserved),
        )
    }
)

_BY_TRIGGER: MappingProxyType[str, Operator] = MappingProxyType(
    {ch: op for op in OPERATORS.values() for ch in op.triggers}
)

SIMPLE = OPERATORS[OperatorId.SIMPLE]


def operator_for_trigger(ch: str) -> Operator | None:
    """Return the operator selected by trigger character *ch*, if any."""
    return _BY_TRIGGER.get(ch)
