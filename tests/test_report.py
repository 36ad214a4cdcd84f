"""
Tests for dashboard charts/formatting and the headless report CLI.
"""
import datetime as dt

import pandas as pd
import pytest

ON = dt.date(2026, 2, 12)


@pytest.fixture
def weekly():
    from coach_mvp.analytics import weekly_breakdown
    from coach_mvp.workspace import seed_state
    return weekly_breakdown(seed_state(on=ON).sessions)


# ═══════════════════════════════════════════════════════════════════════
# CHARTS
# ═══════════════════════════════════════════════════════════════════════

class TestFmtNumber:

    def test_thousands_and_decimal(self):
        from coach_mvp.charts import fmt_number
        assert fmt_number(2125) == "2\u00a0125"
        assert fmt_number(14.1666) == "14,2"

    def test_drops_trailing_zero(self):
        from coach_mvp.charts import fmt_number
        assert fmt_number(64.0) == "64"
        assert fmt_number(0) == "0"


class TestCharts:

    def test_sort_weeks_chronological(self, weekly):
        from coach_mvp.charts import sort_weeks
        assert list(weekly["week"]) == ["2026-W07", "2026-W06"]
        assert list(sort_weeks(weekly)["week"]) == ["2026-W06", "2026-W07"]

    def test_sort_weeks_empty(self):
        from coach_mvp.charts import sort_weeks
        assert sort_weeks(pd.DataFrame()).empty

    def test_volume_chart(self, weekly):
        from coach_mvp.charts import weekly_volume_chart
        fig = weekly_volume_chart(weekly)
        assert fig.data[0].type == "bar"
        assert list(fig.data[0].y) == list(weekly["volume_kg"])

    def test_intensity_axis_fixed(self, weekly):
        from coach_mvp.charts import intensity_chart
        fig = intensity_chart(weekly)
        assert list(fig.layout.yaxis.range) == [0, 1]

    def test_duration_chart(self, weekly):
        from coach_mvp.charts import duration_chart
        fig = duration_chart(weekly)
        assert list(fig.data[0].x) == list(weekly["week"])


# ═══════════════════════════════════════════════════════════════════════
# REPORT CLI
# ═══════════════════════════════════════════════════════════════════════

class TestReport:

    def test_run_report_prints_weeks(self, capsys):
        from coach_mvp.report import run_report
        from coach_mvp.workspace import seed_state
        frames = run_report(seed_state(on=ON))
        out = capsys.readouterr().out
        assert "2026-W06" in out and "2026-W07" in out
        assert len(frames["sessions"]) == 2
        assert list(frames["weekly"]["week"]) == ["2026-W06", "2026-W07"]

    def test_run_report_no_sessions(self, capsys):
        from coach_mvp.report import run_report
        from coach_mvp.workspace import seed_state
        state = seed_state(on=ON).model_copy(update={"sessions": []})
        frames = run_report(state)
        assert frames["sessions"].empty
        assert "No sessions" in capsys.readouterr().out

    def test_export_csv(self, tmp_path):
        from coach_mvp.report import export_csv, run_report
        from coach_mvp.workspace import seed_state
        paths = export_csv(run_report(seed_state(on=ON)), str(tmp_path))
        assert len(paths) == 2
        weekly = pd.read_csv([p for p in paths if "weekly_" in p][0])
        assert list(weekly.columns) == ["week", "volume_kg", "duration_min", "avg_intensity", "sessions"]

    def test_main_reads_saved_snapshot(self, tmp_path, capsys):
        from coach_mvp.report import main
        from coach_mvp.storage import JsonFileStore, save_state
        from coach_mvp.workspace import seed_state
        state = seed_state(on=ON)
        state = state.model_copy(update={"program": state.program.model_copy(update={"name": "Bloc force"})})
        save_state(JsonFileStore(tmp_path), state)
        assert main(["--state-dir", str(tmp_path)]) == 0
        assert "Bloc force" in capsys.readouterr().out

    def test_main_without_snapshot_uses_demo(self, tmp_path, capsys):
        from coach_mvp.report import main
        assert main(["--state-dir", str(tmp_path / "empty")]) == 0
        assert "demo data" in capsys.readouterr().out

    def test_main_undecodable_snapshot_uses_demo(self, tmp_path, capsys):
        from coach_mvp.config import STORAGE_KEY
        from coach_mvp.report import main
        (tmp_path / f"{STORAGE_KEY}.json").write_bytes(b"\xff")
        assert main(["--state-dir", str(tmp_path)]) == 0
        assert "demo data" in capsys.readouterr().out

    def test_main_csv_flag(self, tmp_path):
        from coach_mvp.report import main
        backup = tmp_path / "backup"
        assert main(["--state-dir", str(tmp_path), "--csv", "--backup-dir", str(backup)]) == 0
        assert len(list(backup.glob("*.csv"))) == 2
