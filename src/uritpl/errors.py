"""uritpl exception hierarchy.

Shared across the parser, the expansion engine, and the public API so
every module raises and catches the same types. Each error also derives
from the closest built-in so callers can catch ``ValueError`` or
``KeyError`` without importing uritpl.
"""


class UriTemplateError(Exception):
    """Base for all uritpl-specific errors."""


class ParseError(UriTemplateError, ValueError):
    """Raised when a source string is not a valid URI template.

    Compilation is all-or-nothing: no partial template is ever returned.
    ``position`` is the index of the first character that could not be
    consumed (for reserved-operator errors, the opening brace of the
    offending expression).
    """

    def __init__(self, source: str, position: int, reason: str = "unexpected character") -> None:
        self.source = source
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at position {position} in {source!r}")


class ModifierConflictError(UriTemplateError, ValueError):
    """A prefix modifier (``{var:3}``) was applied to a list or map value.

    Prefix truncation is defined only for scalar strings. The template
    itself is valid; the conflict exists only for this set of bindings.
    """

    def __init__(self, varname: str, value_kind: str) -> None:
        self.varname = varname
        self.value_kind = value_kind
        super().__init__(
            f"Prefix modifier cannot be applied to {value_kind} variable {varname!r}"
        )


class MissingVariableError(UriTemplateError, KeyError):
    """A variable had no binding while variable misses were disallowed.

    Only raised when ``ExpandOptions(allow_variable_miss=False)`` is used.
    """

    def __init__(self, varname: str) -> None:
        self.varname = varname
        super().__init__(varname)

    def __str__(self) -> str:
        return f"No value bound for template variable {self.varname!r}"
