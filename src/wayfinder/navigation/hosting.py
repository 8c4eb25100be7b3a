"""Hosting prefix resolution.

An app may be served at the root (``https://host/``), under a prefix set
in configuration, or under a prefix a reverse proxy assigns per request
(``https://host/tenant-a/``). The active prefix is resolved in that
order of priority:

1. The configured ``base_path``, when non-empty.
2. The path of the current base URI.
3. No prefix.
"""

import logging
from dataclasses import dataclass
from urllib.parse import unquote, urljoin, urlsplit, urlunsplit

logger = logging.getLogger("wayfinder.navigation")


@dataclass(frozen=True, slots=True)
class HostingContext:
    """Where the app is hosted, as seen by one navigation call.

    Attributes:
        base_uri: Absolute base URI of the app (``https://host/prefix/``),
            or ``None`` when the navigator has not been initialized yet.
        base_path: Statically configured hosting prefix, if any.
    """

    base_uri: str | None = None
    base_path: str | None = None

    @property
    def active_prefix(self) -> str | None:
        """The hosting prefix without surrounding slashes, or ``None`` at the root."""
        configured = (self.base_path or "").strip().strip("/")
        if configured:
            logger.debug("Using configured base path %r", configured)
            return configured

        if self.base_uri is None:
            return None

        dynamic = unquote(urlsplit(self.base_uri).path).strip("/")
        if dynamic:
            logger.debug("Detected base path %r from base URI %r", dynamic, self.base_uri)
            return dynamic
        return None

    @property
    def root_path(self) -> str:
        """Local path of the base URI (``/`` or ``/prefix/``)."""
        if self.base_uri is None:
            return "/"
        return unquote(urlsplit(self.base_uri).path).rstrip("/") + "/"

    def to_absolute(self, uri: str) -> str:
        """Combine a relative URI with the base URI, as a browser would."""
        if self.base_uri is None:
            return uri
        return urljoin(_as_directory(self.base_uri), uri)


def _as_directory(uri: str) -> str:
    # "https://host/fu/bar" and "https://host/fu/bar/" name the same app root
    scheme, netloc, path, query, fragment = urlsplit(uri)
    return urlunsplit((scheme, netloc, path.rstrip("/") + "/", query, fragment))
