"""MultiValueMapping protocol: the shape of query params, headers and form data.

A structural protocol so ``Variables.from_multimap`` can accept any
multi-valued mapping without coupling to a concrete HTTP library type.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__iter__`` yields each key once; ``get_list`` returns all values for
    a key, in the order they were received.
    """

    def __iter__(self) -> Iterator[str]: ...
    def get_list(self, key: str) -> list[str]: ...
