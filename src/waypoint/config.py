"""Bridge configuration.

BridgeConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BridgeConfig:
    """Settings for the app-shell side of the bridge. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = BridgeConfig(version="2024-06-01", default_component="Home")
    """

    # Query parameter carrying the route path in file: locations
    url_param: str = "inertia-url"

    # Shell entry document, stripped from file: locations
    index_file: str = "index.html"

    # Asset version stamped on every page payload
    version: str = "current"

    # Component rendered before the first real page arrives
    default_component: str = "App"
