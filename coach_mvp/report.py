"""
CoachMVP — Headless report
Run manually: python -m coach_mvp.report [--state-dir DIR] [--csv] [--backup-dir DIR]
"""
import os
import sys
from datetime import datetime

import pandas as pd

from coach_mvp.analytics import sessions_frame, summarize_sessions, weekly_breakdown
from coach_mvp.charts import fmt_number, sort_weeks
from coach_mvp.config import BACKUP_DIR, STATE_DIR
from coach_mvp.models import CoachState
from coach_mvp.storage import JsonFileStore, load_state
from coach_mvp.workspace import seed_state


def run_report(state: CoachState) -> dict:
    """
    Print per-session and per-week metrics for a workspace snapshot.
    Returns the two frames for callers that want to export them.
    """
    print(f"📋 CoachMVP report — {state.program.name}")
    print(f"   {datetime.now().isoformat(timespec='seconds')}")

    sessions = sessions_frame(state.sessions)
    weekly = sort_weeks(weekly_breakdown(state.sessions))

    if sessions.empty:
        print("\n   No sessions logged. Done.")
        return {"sessions": sessions, "weekly": weekly}

    print(f"\n💪 Sessions ({len(sessions)}):")
    for _, row in sessions.sort_values("date", kind="stable").iterrows():
        print(
            f"   📅 {row['date']} | {row['total_sets']} sets"
            f" | {fmt_number(row['volume_kg'])} kg"
            f" | {fmt_number(row['duration_min'])} min"
            f" | intensité {fmt_number(row['avg_intensity'] * 100)} %"
        )

    print("\n📊 Weekly:")
    for _, row in weekly.iterrows():
        print(
            f"   {row['week']} | {row['sessions']} séance(s)"
            f" | {fmt_number(row['volume_kg'])} kg"
            f" | {fmt_number(row['duration_min'])} min"
            f" | intensité {row['avg_intensity']:.3f}"
        )

    totals = summarize_sessions(state.sessions)
    print(f"\n{'=' * 50}")
    print("🏋️ Totals:")
    print(f"   Volume: {fmt_number(totals.volume_kg)} kg")
    print(f"   Temps: {fmt_number(totals.duration_min)} min")
    print(f"   Intensité moyenne: {fmt_number(totals.avg_intensity * 100)} %")

    return {"sessions": sessions, "weekly": weekly}


def export_csv(frames: dict[str, pd.DataFrame], backup_dir: str = BACKUP_DIR) -> list[str]:
    """Write each frame to <backup_dir>/<name>_<date>.csv. Returns the paths."""
    os.makedirs(backup_dir, exist_ok=True)
    today = datetime.now().strftime("%Y-%m-%d")
    paths = []
    for name, df in frames.items():
        path = os.path.join(backup_dir, f"{name}_{today}.csv")
        df.to_csv(path, index=False)
        print(f"💾 {name}: {len(df)} rows → {path}")
        paths.append(path)
    return paths


def _arg_value(argv: list[str], flag: str, default: str) -> str:
    if flag in argv:
        idx = argv.index(flag)
        if idx + 1 < len(argv):
            return argv[idx + 1]
    return default


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    state_dir = _arg_value(argv, "--state-dir", STATE_DIR)

    try:
        state = load_state(JsonFileStore(state_dir))
    except OSError as e:
        print(f"\n❌ Could not read snapshot in {state_dir}: {e}")
        return 1
    if state is None:
        print(f"   No saved snapshot in {state_dir} — using demo data")
        state = seed_state()

    frames = run_report(state)
    if "--csv" in argv:
        print()
        export_csv(frames, _arg_value(argv, "--backup-dir", BACKUP_DIR))
    return 0


if __name__ == "__main__":
    sys.exit(main())
