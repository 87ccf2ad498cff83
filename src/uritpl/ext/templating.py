"""kida integration: expand URI templates from inside HTML templates.

Requires: pip install uritpl[kida]

Usage::

    from kida import Environment
    from uritpl.ext.templating import register

    env = Environment(autoescape=True)
    register(env)

    {{ "/users/{id}{?tab}" | uri_template(id=user.id, tab="posts") }}
    {{ expand_uri("/search{?q}", q=query) }}

The filter callables themselves live in ``URI_FILTERS`` and
``URI_GLOBALS`` and do not need kida to be installed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from uritpl.errors import UriTemplateError
from uritpl.template import Template

if TYPE_CHECKING:
    from kida import Environment


class KidaNotInstalledError(UriTemplateError, ImportError):
    """Raised when kida is needed but not installed."""


def uri_template(
    source: str | Template,
    variables: Mapping[str, Any] | None = None,
    /,
    **kwargs: Any,
) -> str:
    """Expand *source* with a mapping and/or keyword bindings.

    Keyword bindings win over entries of *variables* with the same name.

    Example:
        {{ "/users/{id}" | uri_template(id=42) }}      → /users/42
        {{ "{/path*}" | uri_template(path=parts) }}    → /a/b/c
    """
    template = source if isinstance(source, Template) else Template(source)
    bindings = {**variables, **kwargs} if variables else kwargs
    return template.expand(bindings)


def expand_uri(source: str | Template, /, **kwargs: Any) -> str:
    """Global form of ``uri_template`` for use in expressions."""
    return uri_template(source, **kwargs)


URI_FILTERS: dict[str, Any] = {
    "uri_template": uri_template,
}

URI_GLOBALS: dict[str, Any] = {
    "expand_uri": expand_uri,
}


def register(env: Environment) -> Environment:
    """Register the URI template filter and global on a kida Environment."""
    env.update_filters(URI_FILTERS)
    for name, value in URI_GLOBALS.items():
        env.add_global(name, value)
    return env


def create_environment(**options: Any) -> Environment:
    """Create a kida Environment with the URI template helpers registered.

    *options* are passed straight to ``kida.Environment``.
    """
    try:
        from kida import Environment
    except ImportError:
        msg = (
            "uritpl.ext.templating requires 'kida' for template integration. "
            "Install with: pip install uritpl[kida]"
        )
        raise KidaNotInstalledError(msg) from None

    return register(Environment(**options))
