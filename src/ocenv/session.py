"""Environment session lifecycle.

A session ensures the environment directory exists, writes helper scripts
and the activation file when the environment is new or being reset, runs an
interactive shell inside it and, once the shell exits, stops the background
processes recorded in ``.killpids``.
"""

import enum
import logging
import os
import shlex
import shutil
import subprocess

from ocenv import environment
from ocenv.activation import Activation, get_activation
from ocenv.config import load_ocm_url
from ocenv.errors import SetupError
from ocenv.models import OcEnvConfig, SessionOptions
from ocenv.pids import PidTracker
from ocenv.scripts import create_bins, resolve_login_script
from ocenv.shell import detect_shell

log = logging.getLogger(__name__)


class SessionState(enum.Enum):
    INIT = "init"
    DIRECTORY_ENSURED = "directory-ensured"
    CONFIGURED = "configured"
    SHELL_ACTIVE = "shell-active"
    CLEANING_UP = "cleaning-up"
    DONE = "done"


def _remove_paths(paths: list[str]) -> None:
    for path in paths:
        try:
            if os.path.isdir(path):
                shutil.rmtree(path)
            else:
                os.unlink(path)
        except OSError as e:
            log.debug("failed to remove %s: %s", path, e)


class SessionRunner:
    """Drive one environment from setup to cleanup."""

    def __init__(
        self,
        options: SessionOptions,
        config: OcEnvConfig | None = None,
        activation: Activation | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self.options = options
        self.config = config if config is not None else OcEnvConfig()
        if activation is None:
            activation = get_activation(options.activation or self.config.activation)
        self.activation = activation
        self._endpoint_url = endpoint_url
        self.path = environment.environment_path(options.alias)
        self.tracker = PidTracker(environment.killpids_path(self.path))
        self.exists = False
        self.state = SessionState.INIT

    def endpoint_url(self) -> str | None:
        """Return the OCM API URL used to look up a configured login script."""
        if self._endpoint_url is None:
            self._endpoint_url = load_ocm_url()
        return self._endpoint_url

    def setup(self) -> None:
        """Ensure the directory exists and configure it when new or reset."""
        if self.options.reset:
            self.delete()
        self.exists = environment.ensure_dir(self.path)
        self.state = SessionState.DIRECTORY_ENSURED
        if not self.exists or self.options.reset:
            print("Setting up environment...")
            self.configure()
        self.state = SessionState.CONFIGURED

    def configure(self) -> None:
        """Write helper scripts and the activation file."""
        override = self.options.login_script
        login_script = resolve_login_script(
            override,
            self.config.login_scripts,
            None if override else self.endpoint_url(),
        )
        create_bins(self.path, self.options, login_script)
        self.activation.write(self.path, self.options.cluster_id)

    def delete(self) -> None:
        print(f"Cleaning up OpenShift environment {self.options.alias}")
        try:
            environment.delete(self.path)
        except OSError as e:
            raise SetupError(f"Can't delete {self.path}: {e}") from e

    def kubeconfig_export(self) -> str:
        return f"export KUBECONFIG={shlex.quote(str(environment.kubeconfig_path(self.path)))}"

    def migrate(self) -> None:
        migrated = self.activation.migrate(self.path, self.options.cluster_id)
        if migrated:
            self.options.cluster_id = migrated

    def start(self) -> int:
        """Run the interactive shell and clean up after it exits.

        Blocks until the shell terminates and returns its exit code.
        """
        kind, executable = detect_shell(self.config.shell)
        env = dict(os.environ)
        env["OCENV_ACTIVE"] = self.options.alias
        self.activation.prepare(self.path)
        launch = self.activation.launch_config(self.path, kind, executable, env)

        print(f"Switching to OpenShift environment {self.options.alias}")
        log.debug("launching %s in %s", shlex.join(launch.argv), self.path)
        self.state = SessionState.SHELL_ACTIVE
        try:
            result = subprocess.run(launch.argv, cwd=self.path, env=launch.env, check=False)
        except OSError as e:
            raise SetupError(f"Can't start shell {executable}: {e}") from e
        finally:
            self.state = SessionState.CLEANING_UP
            try:
                self.tracker.terminate_all()
            finally:
                _remove_paths(launch.cleanup_paths)

        print("Exited OpenShift environment")
        log.debug("shell exited with %d", result.returncode)
        return result.returncode

    def run(self) -> int:
        """Run the whole lifecycle for the options given."""
        if self.options.delete:
            self.delete()
            self.state = SessionState.DONE
            return 0

        self.setup()
        if self.options.export_kubeconfig:
            print(self.kubeconfig_export())
            self.state = SessionState.DONE
            return 0

        self.migrate()
        try:
            self.start()
        finally:
            if self.options.temp:
                self.delete()
        self.state = SessionState.DONE
        return 0
