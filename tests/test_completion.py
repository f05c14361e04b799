"""Unit tests for ocenv.completion."""

from pathlib import Path

import pytest

from ocenv.cli import build_parser
from ocenv.completion import FLAGS, complete, flag_candidates

COMPLETING = {"COMP_LINE": "ocenv "}


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    for alias in ("demo", "dev", "prod"):
        (tmp_path / "ocenv" / alias).mkdir(parents=True)
    return tmp_path


class TestComplete:
    def test_not_completing_returns_none(self):
        assert complete(["ocenv", "de"], {}) is None

    def test_too_few_words_fails(self):
        assert complete(["ocenv"], COMPLETING) == 1

    def test_long_flags(self, capsys):
        assert complete(["ocenv", "--re", "ocenv"], COMPLETING) == 0

        assert capsys.readouterr().out.splitlines() == ["--reset"]

    def test_short_flag(self, capsys):
        complete(["ocenv", "-t", "ocenv"], COMPLETING)

        assert capsys.readouterr().out.splitlines() == ["-t"]

    def test_aliases(self, home, capsys):
        complete(["ocenv", "de", "ocenv"], COMPLETING)

        assert capsys.readouterr().out.splitlines() == ["demo", "dev"]

    def test_nothing_after_cluster_id_flag(self, home, capsys):
        assert complete(["ocenv", "", "-c"], COMPLETING) == 0

        assert capsys.readouterr().out == ""

    def test_missing_environment_root(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("HOME", str(tmp_path))

        assert complete(["ocenv", "", "ocenv"], COMPLETING) == 0
        assert capsys.readouterr().out == ""


class TestFlagTable:
    def test_every_flag_is_accepted_by_the_parser(self):
        option_strings = set(build_parser()._option_string_actions)

        for flag in FLAGS:
            for name in flag.names():
                assert name in option_strings

    def test_single_dash_lists_every_short_flag(self):
        shorts = [f"-{flag.short}" for flag in FLAGS if flag.short]

        assert [c for c in flag_candidates("-") if not c.startswith("--")] == shorts

    def test_help_and_version_are_completed(self, capsys):
        complete(["ocenv", "--", "ocenv"], COMPLETING)

        out = capsys.readouterr().out.splitlines()
        assert "--help" in out
        assert "--version" in out
