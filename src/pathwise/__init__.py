"""Pathwise — typed address templates, validated params, and URL generation.

One route table maps each address template to its validators. The
generator turns an address plus values into a URL; bindings keep
client-side params and the location in step.

Basic usage::

    from pathwise import GeneratorConfig, RouteTable, UrlGenerator
    from pathwise.validation import Schema, integer, required

    table = RouteTable({
        "/users/[id]": {"params": Schema({"id": [required, integer]}, coerce={"id": int})},
        "/search": {},
    })
    generator = UrlGenerator(table, GeneratorConfig(error_url="/error"))

    generator.generate("/users/[id]", {"id": "42"}).url   # '/users/42'
    generator.generate("/search", None, {"q": "dune"}).url  # '/search?q=dune'

Pydantic models work as validators through the adapter::

    from pathwise.validation.pydantic import PydanticValidator
"""

__version__ = "0.1.0"
__all__ = [
    "UNSET",
    "AsyncValidationUnsupported",
    "ConfigurationError",
    "GenerationResult",
    "GeneratorConfig",
    "PageInfo",
    "PageSource",
    "PageState",
    "PathwiseError",
    "ReactiveBinding",
    "Redirect",
    "RouteEntry",
    "RouteNotFound",
    "RouteTable",
    "Substitute",
    "ThrottledSync",
    "UpdateAction",
    "UrlGenerator",
    "ValidationFailure",
    "decode_query",
    "encode_query",
    "fill_template",
    "merge_params",
    "page_info",
    "parse_template",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathwise`` fast while providing a clean top-level API.
    """
    if name == "UNSET":
        from pathwise._internal.types import UNSET

        return UNSET

    if name in ("GeneratorConfig", "UpdateAction"):
        from pathwise import config as _config

        return getattr(_config, name)

    if name in ("GenerationResult", "UrlGenerator"):
        from pathwise import generator as _generator

        return getattr(_generator, name)

    if name in ("Redirect", "RouteEntry", "RouteTable", "Substitute"):
        from pathwise.routing import table as _table

        return getattr(_table, name)

    if name in ("fill_template", "parse_template"):
        from pathwise.routing import template as _template

        return getattr(_template, name)

    if name in ("decode_query", "encode_query"):
        from pathwise.http import query as _query

        return getattr(_query, name)

    if name == "merge_params":
        from pathwise.merge import merge_params

        return merge_params

    if name in ("PageInfo", "PageSource", "PageState", "page_info"):
        from pathwise import pages as _pages

        return getattr(_pages, name)

    if name in ("ReactiveBinding", "ThrottledSync"):
        from pathwise import reactive as _reactive

        return getattr(_reactive, name)

    if name in (
        "AsyncValidationUnsupported",
        "ConfigurationError",
        "PathwiseError",
        "RouteNotFound",
        "ValidationFailure",
    ):
        from pathwise import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
