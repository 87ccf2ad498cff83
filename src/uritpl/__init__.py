"""uritpl: RFC 6570 URI Templates, up to and including Level 4.

Compile a template once, expand it as often as you like.

Basic usage::

    import uritpl

    template = uritpl.compile("https://api.example.com/users/{id}{?fields*}")
    template.expand({"id": 42, "fields": {"sort": "name", "limit": "10"}})
    # -> "https://api.example.com/users/42?sort=name&limit=10"

Bindings from a request's query string::

    from uritpl import Variables
    variables = Variables.from_query_string(b"q=python&tag=a&tag=b")
    uritpl.expand("/search{?q,tag*}", variables)
    # -> "/search?q=python&tag=a&tag=b"

Template filters for kida (``pip install uritpl[kida]``)::

    from uritpl.ext.templating import register
    register(env)
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0.dev0"
__all__ = [
    "ABSENT",
    "Absent",
    "AssocMap",
    "ExpandOptions",
    "ListValue",
    "MissingVariableError",
    "ModifierConflictError",
    "ParseError",
    "Scalar",
    "Template",
    "UriTemplateError",
    "Variables",
    "compile",
    "expand",
    "to_value",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import uritpl`` fast while providing a clean top-level API.
    """
    if name in ("Template", "compile", "expand"):
        from uritpl import template as _template

        return getattr(_template, name)

    if name == "Variables":
        from uritpl.variables import Variables

        return Variables

    if name == "ExpandOptions":
        from uritpl.config import ExpandOptions

        return ExpandOptions

    if name in ("ABSENT", "Absent", "AssocMap", "ListValue", "Scalar", "to_value"):
        from uritpl import values as _values

        return getattr(_values, name)

    if name in ("UriTemplateError", "ParseError", "ModifierConflictError", "MissingVariableError"):
        from uritpl import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
