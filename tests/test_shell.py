"""Unit tests for ocenv.shell."""

from unittest.mock import patch

import pytest

from ocenv.shell import detect_shell
from ocenv.shell.detection import _classify_shell, _shell_candidates


class TestShellDetection:
    def test_classifies_supported_shell_names(self):
        assert _classify_shell("bash") == "bash"
        assert _classify_shell("/bin/zsh") == "zsh"

    def test_unknown_shell_name_returns_none(self):
        assert _classify_shell("/usr/bin/fish") is None

    @patch.dict("os.environ", {"OCENV_SHELL": "zsh", "SHELL": "/bin/bash"}, clear=False)
    def test_candidates_prefer_override_then_config_then_env(self):
        assert _shell_candidates("/usr/local/bin/bash")[:4] == [
            "zsh",
            "/usr/local/bin/bash",
            "/bin/bash",
            "bash",
        ]

    @patch.dict("os.environ", {"SHELL": "/bin/zsh"}, clear=True)
    @patch("ocenv.shell.detection._resolve_executable", side_effect=lambda value: value)
    def test_detect_shell_uses_shell_env_when_supported(self, _resolve):
        assert detect_shell() == ("zsh", "/bin/zsh")

    @patch.dict("os.environ", {"SHELL": "/usr/bin/fish"}, clear=True)
    @patch(
        "ocenv.shell.detection._resolve_executable",
        side_effect=lambda value: {"bash": "/bin/bash"}.get(value),
    )
    def test_detect_shell_falls_back_to_bash(self, _resolve):
        assert detect_shell() == ("bash", "/bin/bash")

    @patch.dict("os.environ", {}, clear=True)
    @patch("ocenv.shell.detection._resolve_executable", return_value=None)
    def test_no_supported_shell_raises(self, _resolve):
        with pytest.raises(RuntimeError):
            detect_shell()
