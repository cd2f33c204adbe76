"""Tests for pathwise.routing.table — route declarations and the frozen table."""

import pytest

from pathwise.errors import ConfigurationError
from pathwise.routing.table import Redirect, RouteEntry, RouteTable, Substitute
from pathwise.validation import Schema, required


class TestRouteTable:
    def test_lookup(self) -> None:
        schema = Schema({"id": [required]})
        table = RouteTable({"/users/[id]": {"params": schema}})
        entry = table["/users/[id]"]
        assert isinstance(entry, RouteEntry)
        assert entry.address == "/users/[id]"
        assert entry.params_validator is schema
        assert entry.search_params_validator is None

    def test_mapping_protocol(self) -> None:
        table = RouteTable({"/a": {}, "/b/[id]": {}})
        assert len(table) == 2
        assert list(table) == ["/a", "/b/[id]"]
        assert "/a" in table
        assert table.get("/missing") is None

    def test_empty(self) -> None:
        assert len(RouteTable()) == 0

    def test_none_declaration(self) -> None:
        table = RouteTable({"/a": None})
        assert table["/a"].params_validator is None

    def test_legacy_keys(self) -> None:
        params = Schema({"id": []})
        search = Schema({"q": []})
        table = RouteTable({
            "/users/[id]": {"params_validation": params, "search_params_validation": search},
        })
        entry = table["/users/[id]"]
        assert entry.params_validator is params
        assert entry.search_params_validator is search

    def test_new_key_wins_over_legacy(self) -> None:
        new = Schema({"id": []})
        old = Schema({"id": []})
        table = RouteTable({"/u/[id]": {"params": new, "params_validation": old}})
        assert table["/u/[id]"].params_validator is new

    def test_meta_is_read_only(self) -> None:
        table = RouteTable({"/a": {"meta": {"title": "A"}}})
        meta = table["/a"].meta
        assert meta["title"] == "A"
        with pytest.raises(TypeError):
            meta["title"] = "B"  # type: ignore[index]

    def test_table_is_read_only(self) -> None:
        table = RouteTable({"/a": {}})
        with pytest.raises(TypeError):
            table["/b"] = table["/a"]  # type: ignore[index]

    def test_entry_template(self) -> None:
        table = RouteTable({"/users/[id]": {}})
        assert table["/users/[id]"].template.names == ("id",)

    def test_accepts_route_entry(self) -> None:
        entry = RouteEntry(address="/a")
        assert RouteTable({"/a": entry})["/a"] is entry

    def test_repr(self) -> None:
        assert repr(RouteTable({"/a": {}})) == "RouteTable(['/a'])"


class TestRouteTableErrors:
    def test_malformed_template(self) -> None:
        with pytest.raises(ConfigurationError, match="nested or unbalanced"):
            RouteTable({"/a/[b[c]]": {}})

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown keys: paramz"):
            RouteTable({"/a": {"paramz": Schema({})}})

    def test_validator_without_validate(self) -> None:
        with pytest.raises(ConfigurationError, match="validate"):
            RouteTable({"/a": {"params": object()}})

    def test_handler_not_callable(self) -> None:
        with pytest.raises(ConfigurationError, match="must be callable"):
            RouteTable({"/a": {"on_params_error": "nope"}})

    def test_non_string_address(self) -> None:
        with pytest.raises(ConfigurationError, match="must be strings"):
            RouteTable({42: {}})  # type: ignore[dict-item]

    def test_entry_under_wrong_address(self) -> None:
        with pytest.raises(ConfigurationError, match="registered under"):
            RouteTable({"/b": RouteEntry(address="/a")})


class TestRouteTableMerge:
    def test_later_tables_win(self) -> None:
        first = Schema({"id": []})
        second = Schema({"id": [required]})
        merged = RouteTable.merge(
            RouteTable({"/a/[id]": {"params": first}, "/b": {}}),
            {"/a/[id]": {"params": second}},
        )
        assert set(merged) == {"/a/[id]", "/b"}
        assert merged["/a/[id]"].params_validator is second

    def test_inputs_untouched(self) -> None:
        base = RouteTable({"/a": {}})
        RouteTable.merge(base, {"/b": {}})
        assert list(base) == ["/a"]


class TestFailureAnswers:
    def test_redirect(self) -> None:
        assert Redirect("/login").url == "/login"

    def test_substitute(self) -> None:
        assert Substitute({"title": "default"}).value == {"title": "default"}

    def test_frozen(self) -> None:
        answer = Redirect("/login")
        with pytest.raises(AttributeError):
            answer.url = "/elsewhere"  # type: ignore[misc]
