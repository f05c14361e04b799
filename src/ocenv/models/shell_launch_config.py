"""Shell launch model for the environment session."""

from dataclasses import dataclass, field


@dataclass
class ShellLaunchConfig:
    """How to launch the interactive shell for an environment."""

    kind: str
    executable: str
    argv: list[str]
    env: dict[str, str]
    cleanup_paths: list[str] = field(default_factory=list)
