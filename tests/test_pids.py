"""Unit tests for ocenv.pids."""

import signal
from unittest.mock import call, patch

from ocenv.pids import PidTracker


class TestRecord:
    def test_appends_one_pid_per_line(self, tmp_path):
        tracker = PidTracker(tmp_path / ".killpids")
        tracker.record(111)
        tracker.record(222)

        assert (tmp_path / ".killpids").read_text() == "111\n222\n"
        assert tracker.pids() == [111, 222]

    def test_missing_file_has_no_pids(self, tmp_path):
        assert PidTracker(tmp_path / ".killpids").pids() == []


class TestTerminateAll:
    @patch("ocenv.pids.os.kill")
    def test_signals_every_pid_and_removes_file(self, mock_kill, tmp_path):
        path = tmp_path / ".killpids"
        path.write_text("111\n222\n")

        stopped = PidTracker(path).terminate_all()

        assert mock_kill.call_args_list == [
            call(111, signal.SIGTERM),
            call(222, signal.SIGTERM),
        ]
        assert stopped == [111, 222]
        assert not path.exists()

    @patch("ocenv.pids.os.kill")
    def test_failure_does_not_stop_remaining_pids(self, mock_kill, tmp_path):
        path = tmp_path / ".killpids"
        path.write_text("111\n222\n")
        mock_kill.side_effect = [ProcessLookupError("gone"), None]

        stopped = PidTracker(path).terminate_all()

        assert mock_kill.call_count == 2
        assert stopped == [222]
        assert not path.exists()

    @patch("ocenv.pids.os.kill")
    def test_unparsable_lines_are_skipped(self, mock_kill, tmp_path, caplog):
        path = tmp_path / ".killpids"
        path.write_text("111\nnot-a-pid\n\n0\n222\n")

        PidTracker(path).terminate_all()

        assert mock_kill.call_args_list == [
            call(111, signal.SIGTERM),
            call(222, signal.SIGTERM),
        ]
        assert "not-a-pid" in caplog.text

    @patch("ocenv.pids.os.kill")
    def test_missing_file_is_nothing_to_track(self, mock_kill, tmp_path, capsys):
        stopped = PidTracker(tmp_path / ".killpids").terminate_all()

        assert stopped == []
        mock_kill.assert_not_called()
        assert "Nothing to kill" in capsys.readouterr().out

    @patch("ocenv.pids.os.kill")
    def test_pid_too_large_for_the_platform_is_skipped(self, mock_kill, tmp_path):
        path = tmp_path / ".killpids"
        path.write_text("99999999999999999999\n111\n")
        mock_kill.side_effect = [OverflowError("Python int too large to convert to C long"), None]

        stopped = PidTracker(path).terminate_all()

        assert mock_kill.call_args_list[-1] == call(111, signal.SIGTERM)
        assert stopped == [111]
        assert not path.exists()

    @patch("ocenv.pids.os.kill")
    def test_invalid_utf8_line_is_skipped(self, mock_kill, tmp_path, caplog):
        path = tmp_path / ".killpids"
        path.write_bytes(b"111\n\xff\xfe\n222\n")

        stopped = PidTracker(path).terminate_all()

        assert mock_kill.call_args_list == [
            call(111, signal.SIGTERM),
            call(222, signal.SIGTERM),
        ]
        assert stopped == [111, 222]
        assert not path.exists()
        assert "failed to read PID" in caplog.text
