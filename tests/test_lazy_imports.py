"""Tests for uritpl.__init__: every public name resolves lazily."""


import pytest

import uritpl


@pytest.mark.parametrize("name", uritpl.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(uritpl, name)
    assert obj is not None, f"uritpl.{name} resolved to None"


def test_version() -> None:
    assert isinstance(uritpl.__version__, str)


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        uritpl.__getattr__("ThisDoesNotExist")
