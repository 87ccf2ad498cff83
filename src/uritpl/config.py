"""Expansion configuration.

ExpandOptions is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExpandOptions:
    """Options for a single ``Template.expand`` call. Immutable after creation.

    The defaults follow RFC 6570: undefined variables are silently
    omitted. Override what you need::

        options = ExpandOptions(allow_variable_miss=False)
    """

    # Strict mode raises MissingVariableError for the first unbound variable.
    # Empty lists and maps are defined values and never raise.
    allow_variable_miss: bool = True


DEFAULT_OPTIONS = ExpandOptions()
