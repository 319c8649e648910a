"""``waypoint compile`` — show the compiled form of a route template.

Prints the anchored pattern and parameter keys, then the extracted
parameters for every ``--match`` path.
"""

import argparse
import json
import sys

from waypoint.errors import DuplicateParameterError
from waypoint.routing.compiler import compile_route


def run_compile(args: argparse.Namespace) -> None:
    """Compile ``args.template`` and report matches for ``args.match`` paths.

    Exits with code 1 if the template repeats a parameter name.
    """
    try:
        route = compile_route(args.template)
    except DuplicateParameterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    results = {path: route.params(path) for path in args.match}

    if args.json:
        payload = {
            "template": route.template,
            "pattern": route.pattern,
            "keys": list(route.keys),
            "matches": results,
        }
        print(json.dumps(payload, indent=2))
        return

    print(f"TEMPLATE  {route.template}")
    print(f"PATTERN   {route.pattern}")
    print(f"KEYS      {', '.join(route.keys) or '(none)'}")
    if not results:
        return

    width = max(len(path) for path in results)
    print("-" * min(width + 12, 80))
    for path, params in results.items():
        if params is None:
            outcome = "no match"
        else:
            outcome = " ".join(f"{k}={v}" for k, v in params.items()) or "match"
        print(f"{path:<{width}}  {outcome}")
