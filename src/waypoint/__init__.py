"""Waypoint — route template compiler for app-shell navigation.

Compiles ``/video/:id`` style templates into immutable matchers that
recognize concrete paths and extract named parameters.

Basic usage::

    from waypoint import RoutePattern

    route = RoutePattern.compile("/video/:id")
    route.match("/video/42").params   # {"id": "42"}
    route.match("/video/42/extra")    # None

Bridge payloads::

    from waypoint.bridge import location_to_path, page_for

    path = location_to_path("file:///app/index.html?inertia-url=/video/42")
    page = page_for(route.match(path), "Video")
"""

__version__ = "0.1.0-dev"
__all__ = [
    "BridgeConfig",
    "ConfigurationError",
    "DuplicateParameterError",
    "Page",
    "RouteMatch",
    "RoutePattern",
    "WaypointError",
    "compile_route",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    if name in ("RoutePattern", "RouteMatch"):
        from waypoint.routing import route as _route

        return getattr(_route, name)

    if name == "compile_route":
        from waypoint.routing.compiler import compile_route

        return compile_route

    if name == "BridgeConfig":
        from waypoint.config import BridgeConfig

        return BridgeConfig

    if name == "Page":
        from waypoint.bridge import Page

        return Page

    if name in ("WaypointError", "ConfigurationError", "DuplicateParameterError"):
        from waypoint import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
