"""Temporary shell startup files that load an activation file."""

import os
import shlex
import tempfile
from pathlib import Path


def write_bash_rcfile(activation_file: Path) -> str:
    """Write a temporary bashrc that sources the user's bashrc and the activation file."""
    rc = tempfile.NamedTemporaryFile(
        mode="w", prefix="ocenv_", suffix=".bashrc", delete=False, encoding="utf-8"
    )
    rc.write(
        # Source the user's normal bashrc so the shell feels familiar.
        "[ -f ~/.bashrc ] && source ~/.bashrc\n"
        f"source {shlex.quote(str(activation_file))}\n"
    )
    rc.close()
    return rc.name


def write_zsh_rcdir(activation_file: Path) -> str:
    """Write a temporary ZDOTDIR containing a zshrc that sources the activation file."""
    rcdir = tempfile.mkdtemp(prefix="ocenv_zsh_")
    rcfile = os.path.join(rcdir, ".zshrc")
    with open(rcfile, "w", encoding="utf-8") as f:
        f.write(
            "[ -f ~/.zshrc ] && source ~/.zshrc\n"
            f"source {shlex.quote(str(activation_file))}\n"
        )
    return rcdir
