"""
CoachMVP — Analytics Engine

Turns exercise entries (sets/reps/load/RPE/tempo/rest) into session metrics,
then rolls sessions up into one row per week.
Nothing here mutates its input or touches storage.
"""
import datetime as dt
import re
from collections.abc import Iterable, Mapping

import numpy as np
import pandas as pd

from coach_mvp.config import DEFAULT_TEMPO, EPLEY_DIVISOR, TEMPO_DELIMITER
from coach_mvp.models import (
    ExerciseEntry,
    Session,
    SessionMetrics,
    WeeklyAggregate,
    safe_number,
)

SESSION_COLUMNS = [
    "id", "date", "week", "notes", "n_exercises", "total_sets",
    "volume_kg", "duration_min", "avg_intensity",
]
WEEKLY_COLUMNS = ["week", "volume_kg", "duration_min", "avg_intensity", "sessions"]

# parseFloat-style: leading number, trailing junk ignored ("3s" → 3)
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


# ═══════════════════════════════════════════════════════════════════════
# 1. NUMERIC HELPERS
# ═══════════════════════════════════════════════════════════════════════

def estimate_one_rm_epley(load: float, reps: float) -> float:
    """Epley: 1RM ≈ load × (1 + reps/30). Zero load gives zero."""
    return load * (1 + reps / EPLEY_DIVISOR)


def _tempo_component(text: str) -> float | None:
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    return safe_number(match.group(0))


def parse_tempo(tempo) -> tuple[float, float, float]:
    """
    Split "ecc-pause-conc" into three second counts.

    A missing or unparsable component counts as 0. An empty tempo, or one
    where nothing parses at all, falls back to DEFAULT_TEMPO.
    """
    if not isinstance(tempo, str) or not tempo.strip():
        tempo = DEFAULT_TEMPO
    parts = [_tempo_component(p) for p in tempo.split(TEMPO_DELIMITER)[:3]]
    if all(p is None for p in parts):
        parts = [_tempo_component(p) for p in DEFAULT_TEMPO.split(TEMPO_DELIMITER)]
    parts += [None] * (3 - len(parts))
    ecc, pause, conc = (p or 0.0 for p in parts)
    return ecc, pause, conc


def set_duration_seconds(reps: float, tempo, rest: float) -> float:
    """Time under tension for one set plus the rest that follows it."""
    time_per_rep = sum(parse_tempo(tempo))
    return reps * time_per_rep + rest


def _exercises_of(session) -> list[ExerciseEntry]:
    exercises = session["exercises"] if isinstance(session, Mapping) else session.exercises
    return [
        ex if isinstance(ex, ExerciseEntry) else ExerciseEntry.model_validate(ex)
        for ex in exercises
    ]


def _as_session(session) -> Session:
    return session if isinstance(session, Session) else Session.model_validate(session)


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


# ═══════════════════════════════════════════════════════════════════════
# 2. SESSION METRICS
# ═══════════════════════════════════════════════════════════════════════

def compute_session_metrics(session) -> SessionMetrics:
    """
    Volume (kg), estimated duration (min) and average intensity for a session.

    Only `exercises` is read. Every set contributes:
      - volume: reps × load
      - intensity: (load / e1RM) × (rpe / 10), averaged over all sets
      - duration: reps × (ecc + pause + conc) + rest
    """
    volume = 0.0
    time_sec = 0.0
    intensity_sum = 0.0
    set_count = 0

    for ex in _exercises_of(session):
        for _ in range(ex.sets):
            volume += ex.reps * ex.load
            one_rm = estimate_one_rm_epley(ex.load, ex.reps)
            relative = ex.load / one_rm if one_rm > 0 else 0.0
            intensity_sum += relative * (ex.rpe / 10)
            set_count += 1
            time_sec += set_duration_seconds(ex.reps, ex.tempo, ex.rest)

    return SessionMetrics(
        volume_kg=volume,
        duration_min=time_sec / 60,
        avg_intensity=intensity_sum / set_count if set_count else 0.0,
    )


def summarize_sessions(sessions: Iterable) -> SessionMetrics:
    """Dashboard header: summed volume/time, mean of per-session intensity."""
    metrics = [compute_session_metrics(s) for s in sessions]
    if not metrics:
        return SessionMetrics()
    return SessionMetrics(
        volume_kg=sum(m.volume_kg for m in metrics),
        duration_min=sum(m.duration_min for m in metrics),
        avg_intensity=sum(m.avg_intensity for m in metrics) / len(metrics),
    )


# ═══════════════════════════════════════════════════════════════════════
# 3. WEEKLY AGGREGATION
# ═══════════════════════════════════════════════════════════════════════

def _as_date(value) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value)[:10])


def _first_thursday(year: int) -> dt.date:
    jan1 = dt.date(year, 1, 1)
    return jan1 + dt.timedelta(days=(3 - jan1.weekday()) % 7)


def week_key(date) -> str:
    """
    "<year>-W<nn>" label, Monday-to-Sunday weeks anchored on the first Thursday.

    The year is always the date's calendar year, so late-December dates stay in
    week 52/53 of their own year and early-January dates can land in week 00.
    """
    day = _as_date(date)
    diff_days = (day - _first_thursday(day.year)).days
    week = 1 + (diff_days + 3) // 7
    return f"{day.year}-W{week:02d}"


def sessions_frame(sessions: Iterable) -> pd.DataFrame:
    """One row per session with its metrics, in input order."""
    rows = []
    for raw in sessions:
        s = _as_session(raw)
        m = compute_session_metrics(s)
        rows.append({
            "id": s.id,
            "date": s.date,
            "week": week_key(s.date),
            "notes": s.notes,
            "n_exercises": len(s.exercises),
            "total_sets": sum(max(ex.sets, 0) for ex in s.exercises),
            "volume_kg": m.volume_kg,
            "duration_min": m.duration_min,
            "avg_intensity": m.avg_intensity,
        })
    if not rows:
        return pd.DataFrame(columns=SESSION_COLUMNS)
    return pd.DataFrame(rows, columns=SESSION_COLUMNS)


def weekly_breakdown(sessions: Iterable) -> pd.DataFrame:
    """
    Weekly rollup as a DataFrame, one row per week key in first-seen order.

    Volume and duration are summed then rounded to whole units; intensity is the
    unweighted mean of per-session averages, 3 decimals.
    """
    df = sessions_frame(sessions)
    if df.empty:
        return pd.DataFrame(columns=WEEKLY_COLUMNS)

    weekly = (
        df.groupby("week", sort=False)
        .agg(
            volume_kg=("volume_kg", "sum"),
            duration_min=("duration_min", "sum"),
            intensity_sum=("avg_intensity", "sum"),
            sessions=("id", "size"),
        )
        .reset_index()
    )
    weekly["volume_kg"] = weekly["volume_kg"].map(_round_half_up)
    weekly["duration_min"] = weekly["duration_min"].map(_round_half_up)
    # round(), not Series.round(): numpy rounds x*1000 half-to-even
    weekly["avg_intensity"] = (weekly["intensity_sum"] / weekly["sessions"]).map(lambda v: round(v, 3))
    return weekly[WEEKLY_COLUMNS]


def aggregate_weekly(sessions: Iterable) -> list[WeeklyAggregate]:
    """Weekly rows as records. Not sorted chronologically; sort for display."""
    weekly = weekly_breakdown(sessions)
    return [
        WeeklyAggregate(
            week=row.week,
            volume_kg=int(row.volume_kg),
            duration_min=int(row.duration_min),
            avg_intensity=float(row.avg_intensity),
            sessions=int(row.sessions),
        )
        for row in weekly.itertuples(index=False)
    ]
