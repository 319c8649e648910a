"""Named-parameter grammar for route templates.

A parameter is a ``:`` followed by one or more ASCII letters, digits,
hyphens, or underscores, e.g. ``:id`` or ``:comment-id``.
"""

import re
from collections.abc import Iterator

# Placeholder syntax in a template
PARAM_PATTERN: re.Pattern[str] = re.compile(r":[A-Za-z0-9_-]+")

# Sub-pattern substituted for each placeholder: one or more non-separator chars
WILDCARD = r"[^/]+"


def find_params(template: str) -> Iterator[re.Match[str]]:
    """Yield every placeholder in *template*, left to right.

    Matches are found against the original template, so ``start()`` and
    ``end()`` always index into *template* itself.
    """
    return PARAM_PATTERN.finditer(template)


def param_name(placeholder: str) -> str:
    """Strip the leading ``:`` from a placeholder."""
    return placeholder[1:]
