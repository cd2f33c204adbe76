"""Pathwise CLI — inspect route tables and generate URLs.

Entry point registered as ``pathwise`` in ``pyproject.toml``::

    [project.scripts]
    pathwise = "pathwise.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathwise`` command."""
    parser = argparse.ArgumentParser(
        prog="pathwise",
        description="Pathwise — typed address templates and URL generation.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pathwise routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered addresses")
    routes_parser.add_argument(
        "table",
        help="Import string (e.g. myapp.routes:table)",
    )

    # -- pathwise generate ------------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Generate a URL for an address")
    generate_parser.add_argument(
        "table",
        help="Import string (e.g. myapp.routes:table)",
    )
    generate_parser.add_argument("address", help="Address template (e.g. /users/[id])")
    generate_parser.add_argument(
        "--params",
        default=None,
        help='Path params as a JSON object (e.g. \'{"id": "42"}\')',
    )
    generate_parser.add_argument(
        "--search",
        default=None,
        help="Search params as a JSON object",
    )
    generate_parser.add_argument(
        "--error-url",
        default=None,
        help="Fallback address for failed generation (default: /error)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from pathwise.cli._routes import run_routes

        run_routes(args)
    elif args.command == "generate":
        from pathwise.cli._generate import run_generate

        run_generate(args)
