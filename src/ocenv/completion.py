"""Flag table and bash completion.

Bash runs ``ocenv`` for completion when set up with ``complete -C ocenv
ocenv``, passing the command name, the word being completed and the word
before it, with ``COMP_LINE`` in the environment.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from ocenv.environment import list_aliases
from ocenv.models import ACTIVATION_KINDS


@dataclass(frozen=True)
class Flag:
    short: str | None
    long: str
    description: str
    dest: str
    takes_value: bool = False
    metavar: str | None = None
    choices: tuple[str, ...] | None = None
    # argparse action for flags that do not set an option, e.g. "help".
    action: str | None = None

    def names(self) -> list[str]:
        names = [f"--{self.long}"]
        if self.short:
            names.insert(0, f"-{self.short}")
        return names


FLAGS: tuple[Flag, ...] = (
    Flag("h", "help", "Show this help message and exit", "help", action="help"),
    Flag("V", "version", "Show the version and exit", "version", action="version"),
    Flag("d", "delete", "Delete environment", "delete"),
    Flag("t", "temp", "Delete environment on exit", "temp"),
    Flag("r", "reset", "Reset environment", "reset"),
    Flag(
        "k",
        "export-kubeconfig",
        "Output export kubeconfig statement, to use environment outside of directory",
        "export_kubeconfig",
    ),
    Flag("c", "cluster-id", "Cluster ID", "cluster_id", takes_value=True, metavar="ID"),
    Flag(
        "l",
        "login-script",
        "OCM login script to execute in a loop in ocb every 30 seconds",
        "login_script",
        takes_value=True,
        metavar="COMMAND",
    ),
    Flag(
        "u",
        "username",
        "Username for individual cluster login",
        "username",
        takes_value=True,
    ),
    Flag(
        "p",
        "password",
        "Password for individual cluster login",
        "password",
        takes_value=True,
    ),
    Flag(
        "a",
        "api",
        "OpenShift API URL for individual cluster login",
        "api_url",
        takes_value=True,
        metavar="URL",
    ),
    Flag(
        None,
        "activation",
        "How the shell loads the environment (default from ~/.ocenv.yaml)",
        "activation",
        takes_value=True,
        choices=ACTIVATION_KINDS,
    ),
    Flag(None, "debug", "Enable debug logging", "debug"),
)

# Flags whose values cannot be completed.
NO_COMPLETION_AFTER = {"-c", "--cluster-id"}


def flag_candidates(partial: str, flags: Iterable[Flag] = FLAGS) -> list[str]:
    """Return flag names starting with ``partial``."""
    return [name for flag in flags for name in flag.names() if name.startswith(partial)]


def alias_candidates(partial: str) -> list[str]:
    return [alias for alias in list_aliases() if alias.startswith(partial)]


def complete(words: list[str], environ: Mapping[str, str]) -> int | None:
    """Print completion candidates when invoked by bash.

    Returns None when not completing, otherwise the exit code to use.
    """
    if "COMP_LINE" not in environ:
        return None
    if len(words) < 2:
        return 1

    partial = words[1]
    preceding = words[2] if len(words) > 2 else ""
    if partial.startswith("-"):
        candidates = flag_candidates(partial)
    elif preceding in NO_COMPLETION_AFTER:
        candidates = []
    else:
        candidates = alias_candidates(partial)

    for candidate in candidates:
        print(candidate)
    return 0
