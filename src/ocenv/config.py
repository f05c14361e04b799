"""Load ocenv and OCM configuration files."""

import json
import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ocenv.constants import CONFIG_FILENAME
from ocenv.errors import ConfigurationError
from ocenv.models import OcEnvConfig, OcmConfig

log = logging.getLogger(__name__)


def config_file() -> Path:
    """Return the path of the user configuration file."""
    return Path.home() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> OcEnvConfig:
    """Load ~/.ocenv.yaml, returning defaults when it does not exist."""
    path = config_file() if path is None else path
    if not path.exists():
        log.debug("no config file at %s", path)
        return OcEnvConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        log.warning("Failed to read config yaml %s: %s", path, e)
        return OcEnvConfig()

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return OcEnvConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")

    try:
        config = OcEnvConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config in {path}: {e}") from e
    log.debug("loaded %d login scripts from %s", len(config.login_scripts), path)
    return config


def ocm_config_path() -> Path:
    """Return the OCM CLI config file in effect for this process."""
    override = os.environ.get("OCM_CONFIG", "").strip()
    if override:
        return Path(override)
    current = Path.home() / ".config" / "ocm" / "ocm.json"
    legacy = Path.home() / ".ocm.json"
    if not current.exists() and legacy.exists():
        return legacy
    return current


def load_ocm_url() -> str | None:
    """Return the API URL OCM is currently logged in to, if it can be read."""
    path = ocm_config_path()
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        config = OcmConfig.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        log.debug("can't read ocm config %s, ignoring: %s", path, e)
        return None
    return config.url or None
