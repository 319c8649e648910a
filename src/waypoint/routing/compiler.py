"""Route template compiler.

Turns ``/video/:id`` into ``^/video/([^/]+)/?$`` plus the ordered
parameter keys ``("id",)``. Placeholders are located against the
original template and the pattern is assembled in one left-to-right
pass, so replacements never shift later match positions.
"""

import logging
import re

from waypoint.errors import DuplicateParameterError
from waypoint.routing.params import WILDCARD, find_params, param_name
from waypoint.routing.route import RoutePattern, TemplateSegment

logger = logging.getLogger("waypoint.routing")


def parse_template(template: str) -> list[TemplateSegment]:
    """Parse a route template into literal and parameter segments.

    Examples::

        "/video"       -> [TemplateSegment("/video", 0, 6)]
        "/video/:id"   -> [TemplateSegment("/video/", 0, 7),
                           TemplateSegment(":id", 7, 10, is_param=True, param_name="id")]

    Raises ``DuplicateParameterError`` at the first parameter name that
    repeats, reading left to right.
    """
    segments: list[TemplateSegment] = []
    seen: set[str] = set()
    cursor = 0

    for m in find_params(template):
        name = param_name(m.group())
        if name in seen:
            raise DuplicateParameterError(route=template, parameter=name)
        seen.add(name)

        if m.start() > cursor:
            segments.append(
                TemplateSegment(value=template[cursor : m.start()], start=cursor, end=m.start())
            )
        segments.append(
            TemplateSegment(
                value=m.group(),
                start=m.start(),
                end=m.end(),
                is_param=True,
                param_name=name,
            )
        )
        cursor = m.end()

    if cursor < len(template):
        segments.append(TemplateSegment(value=template[cursor:], start=cursor, end=len(template)))
    return segments


def build_pattern(segments: list[TemplateSegment]) -> str:
    """Assemble the anchored pattern for parsed *segments*.

    Literal text is escaped so it matches verbatim; each parameter
    becomes a ``([^/]+)`` capture group.
    """
    parts = ["^"]
    for seg in segments:
        if seg.is_param:
            parts.append(f"({WILDCARD})")
        else:
            parts.append(re.escape(seg.value))
    parts.append("/?$")
    return "".join(parts)


def compile_template(template: str) -> tuple[str, tuple[str, ...]]:
    """Return the anchored pattern and ordered parameter keys for *template*.

    Raises ``DuplicateParameterError`` if a parameter name repeats.
    """
    segments = parse_template(template)
    pattern = build_pattern(segments)
    keys = tuple(seg.param_name for seg in segments if seg.param_name is not None)
    logger.debug("compiled %r -> %s keys=%s", template, pattern, keys)
    return pattern, keys


def compile_route(template: str) -> RoutePattern:
    """Compile *template* into an immutable ``RoutePattern``.

    Raises ``DuplicateParameterError`` if a parameter name repeats; no
    pattern is produced in that case.
    """
    return RoutePattern(template)
