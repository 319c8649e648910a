"""Waypoint exception hierarchy.

Shared across the compiler, bridge, and CLI so every module raises and
catches the same types.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when a route definition is invalid.

    Always a definition-time mistake in the route table, never a
    condition worth retrying.
    """


class DuplicateParameterError(ConfigurationError):
    """A route template names the same parameter twice.

    ``route`` is the original template and ``parameter`` the first name
    (reading left to right) that repeats.
    """

    def __init__(self, route: str, parameter: str) -> None:
        self.route = route
        self.parameter = parameter
        super().__init__(f"duplicate url param {parameter!r} was found in {route!r}")

    def __reduce__(self) -> tuple[type, tuple[str, str]]:
        return (type(self), (self.route, self.parameter))
