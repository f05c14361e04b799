"""Interactive shell detection and startup hooks."""

from ocenv.shell.detection import detect_shell
from ocenv.shell.hooks import write_bash_rcfile, write_zsh_rcdir

__all__ = [
    "detect_shell",
    "write_bash_rcfile",
    "write_zsh_rcdir",
]
