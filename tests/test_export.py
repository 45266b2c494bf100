"""Tests for report rendering, export writing and viewer launch."""

import subprocess
import pytest
from datetime import date, datetime

from booklog import ledger as ops
from booklog.config import default_viewer_args
from booklog.models import BookEntry, Ledger
from booklog.services.export import report
from booklog.services.export import (
    ExportError,
    ExportWriteError,
    open_in_viewer,
    render_entry_line,
    render_export,
    render_totals_lines,
    write_export,
)


class FakeProcess:
    """Stands in for a started viewer that has already exited."""

    pid = 4321

    def poll(self):
        return 0


@pytest.fixture
def ledger() -> Ledger:
    return Ledger(
        entries=[
            BookEntry(
                user_name="Ann",
                title="Dune",
                author="Herbert",
                pages=412,
                date_finished=date(2024, 1, 10),
            ),
            BookEntry(
                user_name="Ann",
                title="Infinite Jest",
                author="Wallace",
                pages=1079,
                date_finished=date(2024, 5, 2),
            ),
        ],
        paid_through_pages=412,
        last_paid_date=datetime(2024, 2, 1, 9, 5),
    )


class TestConsoleRendering:
    """Tests for the on-screen listing and totals."""

    def test_entry_line(self, ledger):
        line = render_entry_line(1, ledger.entries[0])
        assert line == '1. Ann | "Dune" by Herbert | 412 pages | finished 2024-01-10'

    def test_totals_lines(self, ledger):
        lines = render_totals_lines(ops.summarize(ledger))
        assert lines == [
            "Total pages (all time): 1,491",
            "Paid-through pages:     412",
            "Unpaid pages:           1,079",
            "Amount owed ($1/100p):  $10",
            "Last paid date:         2024-02-01 09:05",
        ]

    def test_totals_without_payment_omit_last_paid(self):
        lines = render_totals_lines(ops.summarize(Ledger()))
        assert len(lines) == 4
        assert not any(line.startswith("Last paid") for line in lines)

    def test_totals_label_shows_rate(self):
        ledger = Ledger(entries=[])
        lines = render_totals_lines(ops.summarize(ledger, 5), rate_per_hundred=5)
        assert lines[3] == "Amount owed ($5/100p):  $0"


class TestExportReport:
    """Tests for the export report text."""

    def test_report_layout(self, ledger):
        text = render_export(ledger, ops.summarize(ledger))
        assert text.splitlines() == [
            "BOOK LOG",
            "=" * 40,
            "",
            '1. Ann | "Dune" by Herbert',
            "    412 pages | finished 2024-01-10",
            '2. Ann | "Infinite Jest" by Wallace',
            "    1079 pages | finished 2024-05-02",
            "",
            "-" * 40,
            "Total pages:        1,491",
            "Paid-through pages: 412",
            "Unpaid pages:       1,079",
            "Amount owed:        $10",
            "Last paid date:     2024-02-01 09:05",
        ]

    def test_report_for_empty_ledger(self):
        text = render_export(Ledger(), ops.summarize(Ledger()))
        lines = text.splitlines()
        assert "(no entries yet)" in lines
        assert lines[-1] == "Amount owed:        $0"

    def test_write_export_overwrites(self, tmp_path):
        path = tmp_path / "BookLog_Export.txt"
        path.write_text("old report", encoding="utf-8")
        assert write_export("new report\n", path) == path
        assert path.read_text(encoding="utf-8") == "new report\n"

    def test_write_failure_raises(self, tmp_path):
        with pytest.raises(ExportWriteError):
            write_export("text", tmp_path / "missing" / "export.txt")

    def test_write_error_is_export_error(self):
        assert issubclass(ExportWriteError, ExportError)


class TestViewerLaunch:
    """Tests for open_in_viewer (subprocess is always patched)."""

    def test_launches_with_path_appended(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(
            subprocess,
            "Popen",
            lambda args, **kwargs: calls.append(args) or FakeProcess(),
        )
        result = open_in_viewer(tmp_path / "out.txt", ["myviewer", "--plain"])
        assert result.launched is True
        assert result.error is None
        assert calls == [["myviewer", "--plain", str(tmp_path / "out.txt")]]

    def test_viewer_runs_detached_and_is_tracked(self, monkeypatch, tmp_path):
        """The viewer gets its own session and its handle is kept for reaping."""
        seen = {}

        def start(args, **kwargs):
            seen.update(kwargs)
            return FakeProcess()

        monkeypatch.setattr(subprocess, "Popen", start)
        monkeypatch.setattr(report, "_viewer_processes", [])

        result = open_in_viewer(tmp_path / "out.txt", ["myviewer"])

        assert seen["start_new_session"] is True
        assert seen["stdin"] == subprocess.DEVNULL
        assert result.pid == 4321
        assert len(report._viewer_processes) == 1

    def test_exited_viewers_are_reaped_on_next_launch(self, monkeypatch, tmp_path):
        class RunningProcess(FakeProcess):
            def poll(self):
                return None

        finished = FakeProcess()
        running = RunningProcess()
        monkeypatch.setattr(report, "_viewer_processes", [finished, running])
        monkeypatch.setattr(
            subprocess, "Popen", lambda args, **kwargs: FakeProcess()
        )

        open_in_viewer(tmp_path / "out.txt", ["myviewer"])

        assert finished not in report._viewer_processes
        assert running in report._viewer_processes
        assert len(report._viewer_processes) == 2

    def test_launch_failure_is_reported_not_raised(self, monkeypatch, tmp_path):
        def fail(args, **kwargs):
            raise FileNotFoundError("notepad.exe")

        monkeypatch.setattr(subprocess, "Popen", fail)
        result = open_in_viewer(tmp_path / "out.txt", ["notepad.exe"])
        assert result.launched is False
        assert "notepad.exe" in result.error

    def test_default_command_used_when_none(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(
            subprocess,
            "Popen",
            lambda args, **kwargs: calls.append(args) or FakeProcess(),
        )
        open_in_viewer(tmp_path / "out.txt")
        assert calls[0][:-1] == default_viewer_args()

    @pytest.mark.parametrize(
        "platform, expected",
        [
            ("win32", ["notepad.exe"]),
            ("darwin", ["open", "-t"]),
            ("linux", ["xdg-open"]),
        ],
    )
    def test_platform_defaults(self, platform, expected):
        assert default_viewer_args(platform) == expected
