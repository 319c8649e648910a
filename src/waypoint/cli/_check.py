"""``waypoint check`` — route table validation command.

Reads a route table file, compiles every template, and reports repeated
parameter names and repeated route declarations. Exits with code 1 if
any problem is found.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from waypoint.errors import DuplicateParameterError
from waypoint.routing.compiler import compile_route
from waypoint.routing.route import RoutePattern


@dataclass(frozen=True, slots=True)
class TableEntry:
    """One declaration from a route table file."""

    lineno: int
    template: str
    component: str | None = None


def read_route_table(text: str) -> list[TableEntry]:
    """Parse route table *text*.

    One template per line, optionally followed by whitespace and a
    component name. Blank lines and ``#`` comments are skipped.
    """
    entries: list[TableEntry] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        template, *rest = line.split()
        component = rest[0] if rest else None
        entries.append(TableEntry(lineno=lineno, template=template, component=component))
    return entries


def check_routes(entries: list[TableEntry]) -> tuple[list[RoutePattern], list[str]]:
    """Compile *entries*, collecting problems instead of stopping at the first.

    Returns the compiled routes and a list of ``line N: ...`` messages.
    """
    compiled: list[RoutePattern] = []
    problems: list[str] = []
    declared: dict[RoutePattern, int] = {}

    for entry in entries:
        try:
            route = compile_route(entry.template)
        except DuplicateParameterError as exc:
            problems.append(f"line {entry.lineno}: {exc}")
            continue

        if route in declared:
            problems.append(
                f"line {entry.lineno}: route {entry.template!r} "
                f"already declared on line {declared[route]}"
            )
            continue

        declared[route] = entry.lineno
        compiled.append(route)

    return compiled, problems


def run_check(args: argparse.Namespace) -> None:
    """Validate the route table at ``args.file``."""
    path = Path(args.file)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes, problems = check_routes(read_route_table(text))

    if problems:
        for problem in problems:
            print(f"{path}: {problem}", file=sys.stderr)
        print(f"{len(problems)} problem(s) found.", file=sys.stderr)
        raise SystemExit(1)

    print(f"{len(routes)} route(s) OK.")
