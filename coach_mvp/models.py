"""
CoachMVP — Data models.

Loose input (form values, JSON snapshots, data_editor rows) is coerced here,
once, so the analytics never see a missing or non-numeric field.
"""
import datetime as dt
import math
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coach_mvp.config import DEFAULT_TEMPO


def safe_number(value) -> float:
    """Coerce anything to a finite float; unusable values become 0."""
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def safe_int(value) -> int:
    """Like safe_number, truncated toward zero."""
    return int(safe_number(value))


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value)


def _new_id() -> str:
    return uuid.uuid4().hex


class ExerciseEntry(BaseModel):
    """One prescribed or logged movement."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    sets: int = 0
    reps: int = 0
    load: float = 0.0  # kg, 0 for bodyweight
    rpe: float = 0.0
    rest: int = 0  # seconds between sets
    tempo: str = DEFAULT_TEMPO

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value):
        return _text(value)

    @field_validator("sets", "reps", "rest", mode="before")
    @classmethod
    def _coerce_int(cls, value):
        return safe_int(value)

    @field_validator("load", "rpe", mode="before")
    @classmethod
    def _coerce_float(cls, value):
        return safe_number(value)

    @field_validator("tempo", mode="before")
    @classmethod
    def _coerce_tempo(cls, value):
        if not isinstance(value, str) or not value.strip():
            return DEFAULT_TEMPO
        return value.strip()


class ProgramDay(BaseModel):
    model_config = ConfigDict(extra="ignore")

    label: str = ""
    exercises: list[ExerciseEntry] = []

    @field_validator("label", mode="before")
    @classmethod
    def _coerce_label(cls, value):
        return _text(value)


class Program(BaseModel):
    """Reusable template used to seed sessions."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=_new_id)
    name: str = ""
    notes: str = ""
    days: list[ProgramDay] = []

    @field_validator("name", "notes", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return _text(value)


class Session(BaseModel):
    """One logged training day."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=_new_id)
    date: dt.date
    notes: str = ""
    exercises: list[ExerciseEntry] = []

    @field_validator("notes", mode="before")
    @classmethod
    def _coerce_notes(cls, value):
        return _text(value)

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        # datetime (incl. pd.Timestamp) and ISO datetime strings → calendar date
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, str) and len(value) > 10:
            return value[:10]
        return value


class Client(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=_new_id)
    name: str = ""
    email: str = ""
    notes: str = ""

    @field_validator("name", "email", "notes", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return _text(value)


class CoachState(BaseModel):
    """Everything the dashboard persists: program, session history, clients."""
    model_config = ConfigDict(extra="ignore")

    program: Program
    sessions: list[Session] = []
    clients: list[Client] = []


# ═════════════════════════════════════════════════════════════════════
# DERIVED (never persisted)
# ═════════════════════════════════════════════════════════════════════

class SessionMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    volume_kg: float = 0.0
    duration_min: float = 0.0
    avg_intensity: float = 0.0  # nominally 0..1, not clamped


class WeeklyAggregate(BaseModel):
    model_config = ConfigDict(frozen=True)

    week: str
    volume_kg: int = 0
    duration_min: int = 0
    avg_intensity: float = 0.0
    sessions: int = 0
