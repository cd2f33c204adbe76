"""Shared fixtures: a route table modelled on a small app, and a manual clock."""

import pytest

from pathwise.config import GeneratorConfig
from pathwise.generator import UrlGenerator
from pathwise.routing.table import Redirect, RouteTable, Substitute
from pathwise.testing import ManualScheduler
from pathwise.validation import Schema, integer, mapping, required


def _fallback_title(outcome, raw):
    return Substitute({"title": "default"})


def _to_login(outcome, raw):
    return Redirect("/login")


def _give_up(outcome, raw):
    return None


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def table() -> RouteTable:
    return RouteTable({
        "/example/[id]": {"params": Schema({"id": [required]})},
        "/another/(optional)/[title]": {
            "params": Schema({"title": [required]}),
            "search_params": Schema({"filter": [required]}),
        },
        "/fallthrough/[title]": {
            "params": Schema({"title": [required]}),
            "on_params_error": _fallback_title,
        },
        "/optional/[[optional]]/[item]/detail": {
            "params": Schema({"optional": [], "item": [required]}, optional=["optional"]),
        },
        "/restParams/[...rest]/data": {"params": Schema({"rest": [required]})},
        "/typedParams/[typed=number]/data": {
            "params": Schema({"typed": [integer]}, coerce={"typed": int}),
        },
        "/complexParams": {
            "search_params": Schema({"filter": [required], "otherConfig": [mapping]}),
        },
        "/members/[id]": {
            "params": Schema({"id": [required, integer]}, coerce={"id": int}),
            "on_params_error": _to_login,
        },
        "/strict/[id]": {
            "params": Schema({"id": [integer]}),
            "on_params_error": _give_up,
        },
        "/search/[category]": {
            "params": Schema({"category": [required]}),
            "search_params": Schema(
                {"q": [], "page": [integer]},
                optional=["q", "page"],
                keep_unknown=True,
            ),
        },
        "/plain/[slug]": {},
    })


@pytest.fixture
def generator(table: RouteTable) -> UrlGenerator:
    return UrlGenerator(table, GeneratorConfig(error_url="/error"))


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
