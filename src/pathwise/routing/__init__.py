"""Routing — address templates and the static route table.

Templates are compiled when the table is built; the table is read-only
afterwards and safe to share between any number of generators.
"""

from pathwise.routing.table import (
    FailureHandler,
    Redirect,
    RouteEntry,
    RouteTable,
    Substitute,
    entry_from_declaration,
)
from pathwise.routing.template import (
    CompiledTemplate,
    Placeholder,
    PlaceholderKind,
    fill_template,
    parse_template,
)

__all__ = [
    "CompiledTemplate",
    "FailureHandler",
    "Placeholder",
    "PlaceholderKind",
    "Redirect",
    "RouteEntry",
    "RouteTable",
    "Substitute",
    "entry_from_declaration",
    "fill_template",
    "parse_template",
]
