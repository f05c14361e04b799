"""Activation files that point a shell at an environment.

Two mechanisms are supported. ``direct-export`` writes ``.ocenv`` and starts
the shell with a startup file that sources it. ``directory-hook`` writes a
direnv ``.envrc`` and relies on the user's direnv hook to load it when the
shell starts inside the environment directory.
"""

import logging
import shutil
import subprocess
from pathlib import Path

from ocenv.environment import bin_path, kubeconfig_path, ocm_config_path
from ocenv.errors import ConfigurationError, SetupError
from ocenv.models import ShellLaunchConfig
from ocenv.shell import write_bash_rcfile, write_zsh_rcdir

log = logging.getLogger(__name__)


def render_exports(root: Path, cluster_id: str) -> str:
    """Return the export statements that configure a shell for ``root``."""
    lines = [
        f'export KUBECONFIG="{kubeconfig_path(root)}"',
        f'export OCM_CONFIG="{ocm_config_path(root)}"',
        f'export PATH="{bin_path(root)}:$PATH"',
    ]
    if cluster_id:
        lines.append(f'export CLUSTERID="{cluster_id}"')
    return "\n".join(lines) + "\n"


def extract_cluster_id(text: str) -> str | None:
    """Return the value assigned to CLUSTERID in an activation file."""
    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line.startswith("CLUSTERID="):
            continue
        value = line[len("CLUSTERID="):].strip().strip("\"'")
        return value or None
    return None


class Activation:
    """Base class for activation mechanisms."""

    name = ""
    filename = ""
    legacy_filename: str | None = None

    def activation_path(self, root: Path) -> Path:
        return root / self.filename

    def render(self, root: Path, cluster_id: str) -> str:
        return render_exports(root, cluster_id)

    def write(self, root: Path, cluster_id: str) -> Path:
        """Rewrite the activation file in full."""
        path = self.activation_path(root)
        try:
            path.write_text(self.render(root, cluster_id), encoding="utf-8")
        except OSError as e:
            raise SetupError(f"Can't write {path}: {e}") from e
        log.debug("wrote %s", path)
        return path

    def migrate(self, root: Path, cluster_id: str = "") -> str | None:
        """Convert a legacy activation file to the current format.

        Returns the cluster id written to the new file, or None when there
        was nothing to migrate.
        """
        if self.legacy_filename is None:
            return None
        legacy = root / self.legacy_filename
        if not legacy.is_file():
            return None

        print(f"Migrating from {self.legacy_filename} to {self.filename}...")
        try:
            text = legacy.read_text(encoding="utf-8")
        except OSError as e:
            raise SetupError(f"Can't read {legacy}: {e}") from e

        migrated_id = extract_cluster_id(text) or cluster_id
        self.write(root, migrated_id)
        try:
            legacy.unlink()
        except OSError as e:
            log.warning("failed to delete %s, you may need to remove it manually: %s", legacy, e)
        return migrated_id

    def prepare(self, root: Path) -> None:
        """Run before the shell starts."""

    def launch_config(
        self, root: Path, kind: str, executable: str, env: dict[str, str]
    ) -> ShellLaunchConfig:
        raise NotImplementedError


class DirectExportActivation(Activation):
    """Source ``.ocenv`` from a temporary shell startup file."""

    name = "direct-export"
    filename = ".ocenv"
    legacy_filename = ".envrc"

    def launch_config(
        self, root: Path, kind: str, executable: str, env: dict[str, str]
    ) -> ShellLaunchConfig:
        activation_file = self.activation_path(root)
        if kind == "zsh":
            rcdir = write_zsh_rcdir(activation_file)
            return ShellLaunchConfig(
                kind=kind,
                executable=executable,
                argv=[executable, "-i"],
                env={**env, "ZDOTDIR": rcdir},
                cleanup_paths=[rcdir],
            )

        rcfile = write_bash_rcfile(activation_file)
        return ShellLaunchConfig(
            kind=kind,
            executable=executable,
            argv=[executable, "--rcfile", rcfile, "-i"],
            env=env,
            cleanup_paths=[rcfile],
        )


class DirectoryHookActivation(Activation):
    """Leave loading ``.envrc`` to direnv."""

    name = "directory-hook"
    filename = ".envrc"

    def prepare(self, root: Path) -> None:
        direnv = shutil.which("direnv")
        if direnv is None:
            log.warning("direnv not found, %s will not be loaded", self.activation_path(root))
            return
        result = subprocess.run([direnv, "allow", str(root)], check=False)
        if result.returncode != 0:
            log.warning("direnv allow %s exited with %d", root, result.returncode)

    def launch_config(
        self, root: Path, kind: str, executable: str, env: dict[str, str]
    ) -> ShellLaunchConfig:
        return ShellLaunchConfig(
            kind=kind,
            executable=executable,
            argv=[executable, "-i"],
            env=env,
        )


ACTIVATIONS: dict[str, type[Activation]] = {
    DirectExportActivation.name: DirectExportActivation,
    DirectoryHookActivation.name: DirectoryHookActivation,
}


def get_activation(name: str) -> Activation:
    """Return the activation mechanism registered under ``name``."""
    try:
        return ACTIVATIONS[name]()
    except KeyError:
        choices = ", ".join(sorted(ACTIVATIONS))
        raise ConfigurationError(
            f"Unknown activation {name!r}, expected one of: {choices}"
        ) from None
