"""``pathwise routes`` — list registered addresses.

Resolves an import string to a route table and prints every address
with its placeholders and which validators are attached.
"""

import argparse
import sys

from pathwise.cli._resolve import resolve_table
from pathwise.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of ADDRESS, PARAMS, and VALIDATION for a route table."""
    try:
        table = resolve_table(args.table)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not table:
        print("No routes registered.")
        return

    # Build rows: (address, params, validation)
    rows: list[tuple[str, str, str]] = []
    for address, entry in table.items():
        names = [p.token for p in entry.template.placeholders]
        checks = []
        if entry.params_validator is not None:
            checks.append("params")
        if entry.search_params_validator is not None:
            checks.append("search")
        rows.append((address, ", ".join(names) or "-", ", ".join(checks) or "-"))

    # Column widths
    max_address = max(max(len(r[0]) for r in rows), 7)  # "ADDRESS" header
    max_params = max(max(len(r[1]) for r in rows), 6)  # "PARAMS" header

    fmt = f"{{:<{max_address}}}  {{:<{max_params}}}  {{}}"
    print(fmt.format("ADDRESS", "PARAMS", "VALIDATION"))
    sep_len = max_address + max_params + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for address, params, checks in rows:
        print(fmt.format(address, params, checks))
