"""Unit tests for the page helpers (common/ui.py)."""

import contextlib

import pytest

from common import ui
from common.errors import DataLoadError
from controllers.data_controller import load_report


class _Stopped(Exception):
    pass


@pytest.fixture
def quiet_streamlit(monkeypatch):
    """Replace the Streamlit calls that need a running app."""
    shown = []
    monkeypatch.setattr(ui.st, "spinner", lambda *a, **k: contextlib.nullcontext())
    monkeypatch.setattr(ui.st, "error", shown.append)

    def stop():
        raise _Stopped()

    monkeypatch.setattr(ui.st, "stop", stop)
    return shown


class TestRequireReport:
    def test_settings_are_passed_to_the_cached_loader(self, monkeypatch, quiet_streamlit) -> None:
        calls = []
        monkeypatch.setattr(ui, "load_report", lambda *args: calls.append(args) or "report")
        monkeypatch.setenv("MATCHES_CSV_SOURCE", "season-a.csv")
        monkeypatch.setenv("MATCHES_CSV_DELIMITER", ",")
        monkeypatch.setenv("HTTP_CONNECT_TIMEOUT", "3")
        monkeypatch.setenv("HTTP_READ_TIMEOUT", "4")

        assert ui.require_report() == "report"
        monkeypatch.setenv("MATCHES_CSV_SOURCE", "season-b.csv")
        ui.require_report()

        assert calls == [("season-a.csv", ",", (3.0, 4.0)), ("season-b.csv", ",", (3.0, 4.0))]

    def test_failure_is_shown_and_page_stops(self, monkeypatch, quiet_streamlit) -> None:
        def fail(*args):
            raise DataLoadError("could not read missing.csv")

        monkeypatch.setattr(ui, "load_report", fail)
        with pytest.raises(_Stopped):
            ui.require_report()
        assert quiet_streamlit == ["Could not build the analysis: could not read missing.csv"]


class TestLoadReportCache:
    @pytest.fixture(autouse=True)
    def _clear_cache(self):
        load_report.clear()
        yield
        load_report.clear()

    def test_each_source_gets_its_own_entry(self, tmp_path, csv_header) -> None:
        first = tmp_path / "first.csv"
        first.write_text(csv_header + "\n2021;1;2020-09-12;Fulham;0;3;Arsenal;A\n", encoding="utf-8")
        second = tmp_path / "second.csv"
        second.write_text(
            csv_header + "\n2021;1;2020-09-12;Leeds;4;3;Fulham;H\n2021;1;2020-09-13;Everton;1;1;Wolves;D\n",
            encoding="utf-8",
        )

        assert load_report(str(first), ";").summary.total_matches == 1
        assert load_report(str(second), ";").summary.total_matches == 2
        assert load_report(str(first), ";").file_info.name == "first.csv"
