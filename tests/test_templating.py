"""Tests for uritpl.ext.templating: kida filter and global."""

import sys

import pytest

from uritpl.errors import ParseError, UriTemplateError
from uritpl.ext.templating import (
    URI_FILTERS,
    URI_GLOBALS,
    KidaNotInstalledError,
    create_environment,
    expand_uri,
    register,
    uri_template,
)
from uritpl.template import compile


class _RecordingEnv:
    """Stands in for a kida Environment to check registration calls."""

    def __init__(self) -> None:
        self.filters: dict[str, object] = {}
        self.globals: dict[str, object] = {}

    def update_filters(self, filters: dict[str, object]) -> None:
        self.filters.update(filters)

    def add_global(self, name: str, value: object) -> None:
        self.globals[name] = value


class TestUriTemplateFilter:
    def test_keyword_bindings(self) -> None:
        assert uri_template("/users/{id}", id=42) == "/users/42"

    def test_mapping_bindings(self) -> None:
        assert uri_template("{/path*}", {"path": ["a", "b", "c"]}) == "/a/b/c"

    def test_keywords_override_mapping(self) -> None:
        assert uri_template("{?q}", {"q": "old"}, q="new") == "?q=new"

    def test_compiled_template(self) -> None:
        assert uri_template(compile("{x}"), x="1") == "1"

    def test_no_bindings(self) -> None:
        assert uri_template("/a{?b}") == "/a"

    def test_invalid_template(self) -> None:
        with pytest.raises(ParseError):
            uri_template("{")

    def test_global(self) -> None:
        assert expand_uri("/search{?q}", q="a b") == "/search?q=a%20b"


class TestRegister:
    def test_registers_filter_and_global(self) -> None:
        env = _RecordingEnv()
        assert register(env) is env  # type: ignore[arg-type]
        assert env.filters == URI_FILTERS
        assert env.globals == URI_GLOBALS


class TestCreateEnvironment:
    def test_missing_kida(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "kida", None)
        with pytest.raises(KidaNotInstalledError, match=r"uritpl\[kida\]") as exc_info:
            create_environment()
        assert isinstance(exc_info.value, ImportError)
        assert isinstance(exc_info.value, UriTemplateError)


class TestKidaEnvironment:
    def test_renders_filter(self) -> None:
        pytest.importorskip("kida")
        env = create_environment(autoescape=False)
        tpl = env.from_string('{{ "/users/{id}" | uri_template(id=user_id) }}')
        assert tpl.render({"user_id": 7}).strip() == "/users/7"

    def test_renders_global(self) -> None:
        pytest.importorskip("kida")
        env = create_environment(autoescape=False)
        tpl = env.from_string('{{ expand_uri("/search{?q}", q=query) }}')
        assert tpl.render({"query": "python"}).strip() == "/search?q=python"


class TestReservedNames:
    def test_variables_named_like_parameters(self) -> None:
        assert uri_template("{?source,variables}", source="a", variables="b") == "?source=a&variables=b"
        assert expand_uri("{source}", source="x") == "x"
