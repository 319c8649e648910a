"""Bridge boundary — page payloads and app-shell location normalization.

The embedded shell loads from ``file:`` URLs, so the route path travels
in a query parameter (``index.html?inertia-url=/video/42``). These
helpers recover the path to match and package the routing result in the
shape the messaging bridge serializes.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import unquote, urlsplit

from waypoint.config import BridgeConfig
from waypoint.routing.route import RouteMatch

logger = logging.getLogger("waypoint.bridge")

_DEFAULT_CONFIG = BridgeConfig()


def location_to_path(
    href: str,
    base: str | None = None,
    config: BridgeConfig | None = None,
) -> str:
    """Convert a shell location into the route path to match.

    Non-``file:`` locations are returned unchanged. For ``file:``
    locations everything after ``?<config.url_param>=`` wins, percent-decoded
    with ``&`` and ``+`` kept as written; otherwise the path is taken
    relative to the directory of *base* (the shell's own location). The
    index file name is dropped and the result always starts with ``/``.

    Examples::

        location_to_path("file:///app/index.html?inertia-url=/video/42")  -> "/video/42"
        location_to_path("file:///app/about", base="file:///app/index.html")  -> "/about"
        location_to_path("/video/42")  -> "/video/42"
    """
    cfg = config or _DEFAULT_CONFIG
    parts = urlsplit(href)
    if parts.scheme != "file":
        return href

    _, marker, value = href.partition(f"?{cfg.url_param}=")
    if marker:
        path = unquote(value)
    else:
        path = unquote(parts.path)
        if base is not None:
            base_dir = unquote(urlsplit(base).path).removesuffix(cfg.index_file)
            path = path.removeprefix(base_dir)

    path = path.removesuffix(cfg.index_file)
    path = "/" + path.lstrip("/")
    logger.debug("location %r -> %r", href, path)
    return path


@dataclass(frozen=True, slots=True)
class Page:
    """A page payload as delivered across the bridge.

    Usage::

        page = page_for(match, "Video")
        send(page.to_json())
    """

    component: str
    props: dict[str, Any] = field(default_factory=dict)
    url: str = "/"
    version: str = ""

    @classmethod
    def fallback(cls, config: BridgeConfig | None = None) -> "Page":
        """The placeholder page shown before the first real response."""
        cfg = config or _DEFAULT_CONFIG
        return cls(component=cfg.default_component)

    @classmethod
    def from_dict(cls, data: dict[str, Any], config: BridgeConfig | None = None) -> "Page":
        """Build a page from a bridge response, stamping the configured version.

        Raises ``KeyError`` if ``component`` is missing.
        """
        cfg = config or _DEFAULT_CONFIG
        return cls(
            component=data["component"],
            props=dict(data.get("props") or {}),
            url=data.get("url", "/"),
            version=cfg.version,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "component": self.component,
            "props": dict(self.props),
            "url": self.url,
            "version": self.version,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


def page_for(
    match: RouteMatch,
    component: str,
    props: dict[str, Any] | None = None,
    config: BridgeConfig | None = None,
) -> Page:
    """Package a route match as a ``Page``.

    Path parameters become props; entries in *props* override them.
    """
    cfg = config or _DEFAULT_CONFIG
    merged: dict[str, Any] = {**match.params, **(props or {})}
    return Page(component=component, props=merged, url=match.path, version=cfg.version)
