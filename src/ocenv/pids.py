"""Tracking file for background processes started inside a session."""

import logging
import os
import signal
from pathlib import Path

log = logging.getLogger(__name__)


class PidTracker:
    """Pids appended to ``.killpids``, one per line.

    The generated ``ocb`` script appends to the same file from the shell, so
    the file is the only shared state. A missing file means nothing to stop.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def record(self, pid: int) -> None:
        """Append a pid, the same way the `echo $! >>` lines in ``ocb`` do."""
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(f"{pid}\n")

    def _read_lines(self) -> list[str] | None:
        try:
            return self.path.read_text(encoding="utf-8", errors="replace").splitlines()
        except FileNotFoundError:
            return None

    def pids(self) -> list[int]:
        """Return the recorded pids, skipping lines that are not numbers."""
        return self._parse(self._read_lines() or [])

    @staticmethod
    def _parse(lines: list[str]) -> list[int]:
        pids = []
        for line in lines:
            value = line.strip()
            if not value:
                continue
            try:
                pid = int(value)
            except ValueError:
                log.warning("failed to read PID %r, you may need to clean up manually", value)
                continue
            # 0 and negative values address process groups, including our own.
            if pid <= 0:
                log.warning("ignoring invalid PID %d", pid)
                continue
            pids.append(pid)
        return pids

    def terminate_all(self) -> list[int]:
        """Send SIGTERM to every recorded pid, then remove the tracking file.

        Each pid is handled on its own; a failure is logged and the rest are
        still signalled. Returns the pids that were signalled.
        """
        try:
            lines = self._read_lines()
        except OSError as e:
            log.warning("failed to read %s, you may need to clean up manually: %s", self.path, e)
            return []
        if lines is None:
            print("Nothing to kill")
            return []

        stopped = []
        for pid in self._parse(lines):
            print(f"Stopping process {pid}")
            try:
                os.kill(pid, signal.SIGTERM)
            except (OSError, OverflowError) as e:
                log.warning(
                    "failed to stop process %d, you may need to clean up manually: %s", pid, e
                )
                continue
            stopped.append(pid)

        try:
            self.path.unlink()
        except OSError as e:
            log.warning(
                "failed to delete %s, you may need to clean it up manually: %s", self.path, e
            )
        return stopped
