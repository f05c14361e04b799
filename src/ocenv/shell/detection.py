"""Shell detection."""

import os
import shutil


def _classify_shell(candidate: str) -> str | None:
    """Return the supported shell kind for a candidate executable/path."""
    name = os.path.basename(candidate).lower()
    if name == "bash":
        return "bash"
    if name == "zsh":
        return "zsh"
    return None


def _resolve_executable(candidate: str) -> str | None:
    """Resolve an executable name or path to a runnable command path."""
    if os.path.sep in candidate:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
        return None
    return shutil.which(candidate)


def _shell_candidates(preferred: str | None = None) -> list[str]:
    """Return shell candidates in preference order."""
    candidates: list[str] = []
    override = os.environ.get("OCENV_SHELL", "").strip()
    if override:
        candidates.append(override)
    if preferred and preferred.strip():
        candidates.append(preferred.strip())

    env_shell = os.environ.get("SHELL", "").strip()
    if env_shell:
        candidates.append(env_shell)

    candidates.extend(["bash", "zsh"])

    deduped: list[str] = []
    seen: set[str] = set()
    for item in candidates:
        if item in seen:
            continue
        seen.add(item)
        deduped.append(item)
    return deduped


def detect_shell(preferred: str | None = None) -> tuple[str, str]:
    """Detect a supported shell and return (kind, executable path)."""
    for candidate in _shell_candidates(preferred):
        kind = _classify_shell(candidate)
        if not kind:
            continue
        executable = _resolve_executable(candidate)
        if executable:
            return kind, executable
    raise RuntimeError(
        "No supported shell found. Install bash or zsh, "
        "or set OCENV_SHELL to one of them."
    )
