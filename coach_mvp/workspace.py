"""
CoachMVP — Workspace editing.

Program builder, session log and client list operations. Every function
returns new records; the ones passed in are left untouched.
"""
import datetime as dt

import pandas as pd

from coach_mvp.config import (
    DEFAULT_CLIENT,
    DEFAULT_EXERCISE,
    SEED_CLIENTS,
    SEED_PROGRAM,
    SEED_SESSIONS,
    TIMEZONE,
)
from coach_mvp.models import Client, CoachState, ExerciseEntry, Program, ProgramDay, Session

EXERCISE_COLUMNS = ["name", "sets", "reps", "load", "rpe", "tempo", "rest"]


def today() -> dt.date:
    """Current calendar date in the configured timezone."""
    return pd.Timestamp.now(tz=TIMEZONE).date()


def _check_index(items: list, idx: int, what: str):
    if not 0 <= idx < len(items):
        raise IndexError(f"{what} index {idx} out of range (0..{len(items) - 1})")


def _replace(items: list, idx: int, item) -> list:
    return [item if i == idx else x for i, x in enumerate(items)]


def _without(items: list, idx: int) -> list:
    return [x for i, x in enumerate(items) if i != idx]


# ═════════════════════════════════════════════════════════════════════
# 1. PROGRAM BUILDER
# ═════════════════════════════════════════════════════════════════════

def new_exercise() -> ExerciseEntry:
    return ExerciseEntry(**DEFAULT_EXERCISE)


def _with_day(program: Program, day_idx: int, exercises: list[ExerciseEntry]) -> Program:
    day = program.days[day_idx].model_copy(update={"exercises": exercises})
    return program.model_copy(update={"days": _replace(program.days, day_idx, day)})


def add_exercise(program: Program, day_idx: int) -> Program:
    _check_index(program.days, day_idx, "Day")
    exercises = [*program.days[day_idx].exercises, new_exercise()]
    return _with_day(program, day_idx, exercises)


def update_exercise(program: Program, day_idx: int, ex_idx: int, entry) -> Program:
    _check_index(program.days, day_idx, "Day")
    exercises = program.days[day_idx].exercises
    _check_index(exercises, ex_idx, "Exercise")
    entry = entry if isinstance(entry, ExerciseEntry) else ExerciseEntry.model_validate(entry)
    return _with_day(program, day_idx, _replace(exercises, ex_idx, entry))


def delete_exercise(program: Program, day_idx: int, ex_idx: int) -> Program:
    _check_index(program.days, day_idx, "Day")
    exercises = program.days[day_idx].exercises
    _check_index(exercises, ex_idx, "Exercise")
    return _with_day(program, day_idx, _without(exercises, ex_idx))


def exercises_frame(exercises: list[ExerciseEntry]) -> pd.DataFrame:
    """Editable table, columns in form order."""
    return pd.DataFrame([ex.model_dump() for ex in exercises], columns=EXERCISE_COLUMNS)


def exercises_from_frame(df: pd.DataFrame) -> list[ExerciseEntry]:
    """Back from an edited table; blank cells (NaN/None) coerce to 0 or defaults."""
    return [ExerciseEntry.model_validate(row) for row in df.to_dict("records")]


def add_day(program: Program, label: str = "") -> Program:
    label = label or f"Jour {chr(ord('A') + len(program.days))}"
    days = [*program.days, ProgramDay(label=label, exercises=[new_exercise()])]
    return program.model_copy(update={"days": days})


# ═════════════════════════════════════════════════════════════════════
# 2. SESSION LOG
# ═════════════════════════════════════════════════════════════════════

def session_from_day(program: Program, day_idx: int, on: dt.date | None = None) -> Session:
    """New session pre-filled with a deep copy of the day's prescription."""
    _check_index(program.days, day_idx, "Day")
    exercises = [ex.model_copy(deep=True) for ex in program.days[day_idx].exercises]
    return Session(date=on or today(), notes="", exercises=exercises)


def update_session(sessions: list[Session], idx: int, session) -> list[Session]:
    _check_index(sessions, idx, "Session")
    session = session if isinstance(session, Session) else Session.model_validate(session)
    return _replace(sessions, idx, session)


def delete_session(sessions: list[Session], idx: int) -> list[Session]:
    _check_index(sessions, idx, "Session")
    return _without(sessions, idx)


# ═════════════════════════════════════════════════════════════════════
# 3. CLIENTS
# ═════════════════════════════════════════════════════════════════════

def add_client(clients: list[Client]) -> list[Client]:
    return [*clients, Client(**DEFAULT_CLIENT)]


def update_client(clients: list[Client], idx: int, client) -> list[Client]:
    _check_index(clients, idx, "Client")
    client = client if isinstance(client, Client) else Client.model_validate(client)
    return _replace(clients, idx, client)


def delete_client(clients: list[Client], idx: int) -> list[Client]:
    _check_index(clients, idx, "Client")
    return _without(clients, idx)


# ═════════════════════════════════════════════════════════════════════
# 4. DEMO SEEDS
# ═════════════════════════════════════════════════════════════════════

def seed_program() -> Program:
    return Program.model_validate(SEED_PROGRAM)


def seed_sessions(on: dt.date | None = None) -> list[Session]:
    """Demo sessions dated relative to `on` (default: today)."""
    on = on or today()
    program = seed_program()
    sessions = []
    for sid, days_ago, notes, day_idx in SEED_SESSIONS:
        s = session_from_day(program, day_idx, on=on - dt.timedelta(days=days_ago))
        sessions.append(s.model_copy(update={"id": sid, "notes": notes}))
    return sessions


def seed_clients() -> list[Client]:
    return [Client.model_validate(c) for c in SEED_CLIENTS]


def seed_state(on: dt.date | None = None) -> CoachState:
    return CoachState(
        program=seed_program(),
        sessions=seed_sessions(on),
        clients=seed_clients(),
    )
