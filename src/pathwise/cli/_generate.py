"""``pathwise generate`` — print the URL for an address and param values."""

import argparse
import json
import sys
from typing import Any

from pathwise.cli._resolve import resolve_table
from pathwise.config import GeneratorConfig
from pathwise.errors import ConfigurationError
from pathwise.generator import UrlGenerator


def _load_json(raw: str | None, flag: str) -> dict[str, Any] | None:
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        print(f"Error: {flag} is not valid JSON: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    if not isinstance(value, dict):
        print(f"Error: {flag} must be a JSON object", file=sys.stderr)
        raise SystemExit(2)
    return value


def run_generate(args: argparse.Namespace) -> None:
    """Generate and print a URL; exit with status 1 on an error result."""
    params = _load_json(args.params, "--params")
    search = _load_json(args.search, "--search")

    try:
        table = resolve_table(args.table)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    config = GeneratorConfig(error_url=args.error_url) if args.error_url else GeneratorConfig()
    result = UrlGenerator(table, config).generate(args.address, params, search)
    print(result.url)
    if result.error:
        raise SystemExit(1)
