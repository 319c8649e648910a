"""Waypoint CLI — compile route templates and lint route tables.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — route template compiler for app-shell navigation.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log compiler activity to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint compile -------------------------------------------------
    compile_parser = subparsers.add_parser("compile", help="Compile a route template")
    compile_parser.add_argument("template", help="Route template (e.g. /video/:id)")
    compile_parser.add_argument(
        "--match",
        action="append",
        default=[],
        metavar="PATH",
        help="Path to match against the compiled route (repeatable)",
    )
    compile_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    # -- waypoint check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a route table file")
    check_parser.add_argument(
        "file",
        help="Route table: one template per line, optional component name after it",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "compile":
        from waypoint.cli._compile import run_compile

        run_compile(args)
    elif args.command == "check":
        from waypoint.cli._check import run_check

        run_check(args)
