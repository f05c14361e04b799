"""Filesystem layout of a named environment."""

import logging
import shutil
from pathlib import Path

from ocenv.constants import (
    BIN_DIRNAME,
    DIR_MODE,
    ENV_ROOT_DIRNAME,
    KILLPIDS_FILENAME,
    KUBECONFIG_FILENAME,
    OCM_CONFIG_FILENAME,
)
from ocenv.errors import SetupError

log = logging.getLogger(__name__)


def environments_root() -> Path:
    """Return the directory holding every environment (~/ocenv)."""
    return Path.home() / ENV_ROOT_DIRNAME


def environment_path(alias: str) -> Path:
    return environments_root() / alias


def bin_path(path: Path) -> Path:
    return path / BIN_DIRNAME


def kubeconfig_path(path: Path) -> Path:
    return path / KUBECONFIG_FILENAME


def ocm_config_path(path: Path) -> Path:
    return path / OCM_CONFIG_FILENAME


def killpids_path(path: Path) -> Path:
    return path / KILLPIDS_FILENAME


def ensure_dir(path: Path) -> bool:
    """Create ``path`` if needed and return whether it already existed."""
    try:
        path.mkdir(mode=DIR_MODE, parents=True)
    except FileExistsError:
        if not path.is_dir():
            raise SetupError(f"{path} exists and is not a directory") from None
        return True
    except OSError as e:
        raise SetupError(f"Can't create directory {path}: {e}") from e
    log.debug("created %s", path)
    return False


def delete(path: Path) -> None:
    """Remove an environment tree. A missing tree is not an error."""
    if not path.exists():
        log.debug("%s already absent", path)
        return
    shutil.rmtree(path)


def list_aliases() -> list[str]:
    """Return the names of all existing environments."""
    root = environments_root()
    try:
        return sorted(entry.name for entry in root.iterdir() if entry.is_dir())
    except OSError:
        return []
