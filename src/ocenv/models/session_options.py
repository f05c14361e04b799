"""Per-invocation options for an environment session."""

import logging
from dataclasses import dataclass

from ocenv.errors import ConfigurationError

log = logging.getLogger(__name__)


@dataclass
class SessionOptions:
    """What the user asked for on the command line."""

    alias: str = ""
    cluster_id: str = ""
    login_script: str = ""
    username: str = ""
    password: str = ""
    api_url: str = ""
    reset: bool = False
    temp: bool = False
    delete: bool = False
    export_kubeconfig: bool = False
    activation: str | None = None

    def validate(self) -> None:
        """Check required identifiers and fill in the alias.

        Raises ConfigurationError before anything touches the filesystem.
        """
        if not self.cluster_id and not self.alias:
            raise ConfigurationError("Cluster ID or alias required")
        if self.username and not self.api_url:
            raise ConfigurationError("Username set but no API URL. Use --api to specify it.")
        if not self.alias:
            log.info("no alias set, using cluster ID %s", self.cluster_id)
            self.alias = self.cluster_id
        # The alias names a directory that may be removed recursively.
        if "/" in self.alias or self.alias in {".", ".."}:
            raise ConfigurationError(f"Invalid alias: {self.alias!r}")
