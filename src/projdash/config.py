"""Dashboard configuration.

DashboardConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from projdash.errors import ConfigurationError

SCHEMES = ("index", "label", "both")


@dataclass(frozen=True, slots=True)
class DashboardConfig:
    """Dashboard configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DashboardConfig(root="/srv/projects", port=3000, scheme="label")
    """

    # Scan root: project directories live directly beneath it
    root: str | Path = "."

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Addressing scheme for project links: "index" (/p/<m>-<p>/),
    # "label" (/<Category-Label>/) or "both"
    scheme: str = "index"

    # Static serving
    show_dir_listing: bool = False
    index_file: str = "index.html"
    cache_control: str = "no-cache"

    # Index page
    title: str = "Global Sales Project Dashboard"

    # Logging
    log_level: str = "info"

    def validate(self) -> None:
        """Raise ``ConfigurationError`` for values the app cannot run with."""
        if self.scheme not in SCHEMES:
            msg = f"Unknown addressing scheme {self.scheme!r}. Expected one of: {', '.join(SCHEMES)}"
            raise ConfigurationError(msg)
        if not 0 <= self.port <= 65535:
            msg = f"Port {self.port} is out of range (0-65535)"
            raise ConfigurationError(msg)
        if not self.index_file or "/" in self.index_file:
            msg = f"index_file must be a bare file name, got {self.index_file!r}"
            raise ConfigurationError(msg)
