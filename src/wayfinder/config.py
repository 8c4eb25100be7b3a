"""Navigation configuration.

NavigationConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

import warnings
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NavigationConfig:
    """Navigation configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = NavigationConfig(multi_route_templates=False)

    ``base_path`` is the static hosting prefix from older releases.
    It is still honored, but hosting prefixes are normally detected from
    the navigator's base URI, which also covers prefixes assigned per
    request by a reverse proxy.
    """

    # Hosting (deprecated — prefer dynamic detection from the base URI)
    base_path: str | None = None

    # Pick among every pattern a view declares instead of only the primary one
    multi_route_templates: bool = True

    # Abort table construction on malformed templates (False: skip and warn)
    strict_templates: bool = True

    def __post_init__(self) -> None:
        if self.base_path and self.base_path.strip():
            warnings.warn(
                "NavigationConfig.base_path is deprecated; the hosting prefix is "
                "detected from the navigator's base URI.",
                DeprecationWarning,
                stacklevel=3,
            )
