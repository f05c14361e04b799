"""Helper scripts placed on PATH inside an environment."""

import logging
import os
import shlex
from pathlib import Path

from ocenv.constants import BIN_MODE, DIR_MODE, LOGIN_REFRESH_INTERVAL, TUNNEL_STARTUP_DELAY
from ocenv.environment import bin_path, killpids_path
from ocenv.errors import ConfigurationError, SetupError
from ocenv.models import SessionOptions

log = logging.getLogger(__name__)

SAFETY_PREAMBLE = "#!/bin/bash\n\nset -euo pipefail\n\n"
SUDO_PREAUTH = "sudo true\n"


def tunnel_command(cluster_id: str) -> str:
    return f"ocm tunnel {cluster_id}\n"


def describe_command(cluster_id: str) -> str:
    return f"ocm describe cluster {cluster_id}\n"


def login_command(
    cluster_id: str, username: str = "", password: str = "", api_url: str = ""
) -> str:
    """Return the body of ``ocl``.

    Without a username the cluster is reached through an OCM token login.
    With a username, ``api_url`` is required and the password is optional.
    """
    if not username:
        return f"ocm cluster login --token {cluster_id}\n"
    if not api_url:
        raise ConfigurationError("Username set but no API URL. Use --api to specify it.")
    parts = ["oc", "login", "-u", shlex.quote(username)]
    if password:
        parts += ["-p", shlex.quote(password)]
    parts.append(shlex.quote(api_url))
    return " ".join(parts) + "\n"


def resolve_login_script(
    override: str, login_scripts: dict[str, str], endpoint_url: str | None
) -> str | None:
    """Pick the login-maintenance command for ``ocb``.

    An explicit override wins over the per-endpoint table.
    """
    if override:
        print(f"Using login script from -l argument: {override}")
        return override
    if endpoint_url is None:
        log.debug("no OCM endpoint known, skipping login script lookup")
        return None
    script = login_scripts.get(endpoint_url)
    if script:
        print(f"Using login script from config: {script}")
        return script
    log.debug("no login script configured for %s", endpoint_url)
    return None


def background_script(cluster_id: str, login_script: str | None, killpids: Path) -> str:
    """Return the body of ``ocb``.

    Every detached job appends its pid to ``killpids`` so the session can
    stop it when the shell exits.
    """
    body = SAFETY_PREAMBLE + SUDO_PREAUTH
    if not login_script:
        return body
    pidfile = shlex.quote(str(killpids))
    return body + (
        "\n"
        "while true; do\n"
        f"  sleep {LOGIN_REFRESH_INTERVAL}s\n"
        f"  {login_script}\n"
        "done &\n"
        f"echo $! >> {pidfile}\n"
        f"{login_script}\n"
        "\n"
        f"ocm-backplane tunnel {cluster_id} &\n"
        f"echo $! >> {pidfile}\n"
        f"sleep {TUNNEL_STARTUP_DELAY}s\n"
        f"ocm backplane login {cluster_id}\n"
    )


def create_bin(bin_dir: Path, name: str, content: str) -> bool:
    """Write an executable script unless one with that name already exists.

    Returns whether the script was written. Existing scripts are left alone
    so local edits survive a plain re-run.
    """
    path = bin_dir / name
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, BIN_MODE)
    except FileExistsError:
        log.debug("%s exists, keeping it", path)
        return False
    except OSError as e:
        raise SetupError(f"Can't create file {path}: {e}") from e
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(path, BIN_MODE)
    except OSError as e:
        raise SetupError(f"Can't write file {path}: {e}") from e
    log.debug("wrote %s", path)
    return True


def create_bins(root: Path, options: SessionOptions, login_script: str | None) -> None:
    """Create ``bin/`` and the oct, ocl, ocd and ocb helper scripts."""
    bin_dir = bin_path(root)
    try:
        bin_dir.mkdir(mode=DIR_MODE, exist_ok=True)
    except OSError as e:
        raise SetupError(f"Can't create directory {bin_dir}: {e}") from e

    cluster_id = options.cluster_id
    scripts = {
        "oct": tunnel_command(cluster_id),
        "ocl": login_command(cluster_id, options.username, options.password, options.api_url),
        "ocd": describe_command(cluster_id),
        "ocb": background_script(cluster_id, login_script, killpids_path(root)),
    }
    for name, content in scripts.items():
        create_bin(bin_dir, name, content)
