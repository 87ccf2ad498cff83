"""Literal, Expression and Varspec frozen dataclasses."""

from dataclasses import dataclass

from uritpl.operators import OperatorId

MAX_PREFIX_LENGTH = 9999


@dataclass(frozen=True, slots=True)
class Varspec:
    """One variable reference inside an expression.

    ``{user.name:3}`` -> Varspec("user.name", "user.name", prefix_length=3)
    ``{list*}``       -> Varspec("list", "list", exploded=True)
    ``{caf%C3%A9}``   -> Varspec("caf%C3%A9", "café")

    ``varname`` is the raw token as written and is the lookup key;
    ``decoded_name`` has percent-triplets decoded and is what gets
    re-encoded when the operator emits the variable's name.
    """

    varname: str
    decoded_name: str
    prefix_length: int | None = None
    exploded: bool = False

    def __post_init__(self) -> None:
        if self.prefix_length is not None:
            if not 1 <= self.prefix_length <= MAX_PREFIX_LENGTH:
                msg = f"prefix length must be in [1, {MAX_PREFIX_LENGTH}], got {self.prefix_length}"
                raise ValueError(msg)
            if self.exploded:
                msg = "a varspec cannot carry both a prefix and an explode modifier"
                raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal text, already normalized to its percent-encoded output form."""

    text: str


@dataclass(frozen=True, slots=True)
class Expression:
    """A ``{...}`` expression: an operator applied to a list of varspecs."""

    operator: OperatorId
    varspecs: tuple[Varspec, ...] = ()


Term = Literal | Expression
