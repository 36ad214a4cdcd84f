"""
CoachMVP — Snapshot persistence.

The whole workspace ({program, sessions, clients}) is saved as one JSON blob
under a single key. Stores are injected, so analytics never depend on them:
MemoryStore for tests, JsonFileStore for the dashboard and report CLI.
"""
import json
from pathlib import Path
from typing import Optional, Protocol

from pydantic import ValidationError

from coach_mvp.config import STATE_DIR, STORAGE_KEY
from coach_mvp.models import Client, CoachState, Program, Session
from coach_mvp.workspace import seed_clients, seed_program, seed_sessions


class StateStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store."""

    def __init__(self, initial: dict | None = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """One <key>.json file per key under `directory`."""

    def __init__(self, directory: str | Path = STATE_DIR):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def _read_raw(store: StateStore, key: str) -> Optional[dict]:
    try:
        raw = store.get(key)
    except UnicodeDecodeError as e:
        print(f"  ⚠️ Snapshot '{key}' is not valid UTF-8 — ignoring ({e})")
        return None
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"  ⚠️ Snapshot '{key}' is not valid JSON — ignoring ({e})")
        return None
    if not isinstance(data, dict):
        print(f"  ⚠️ Snapshot '{key}' is not an object — ignoring")
        return None
    return data


def load_state(store: StateStore, key: str = STORAGE_KEY) -> Optional[CoachState]:
    """Saved snapshot, or None when absent or unreadable."""
    data = _read_raw(store, key)
    if data is None:
        return None
    try:
        return CoachState.model_validate(data)
    except ValidationError as e:
        print(f"  ⚠️ Snapshot '{key}' failed validation — ignoring ({e.error_count()} errors)")
        return None


def load_or_seed(store: StateStore, key: str = STORAGE_KEY) -> CoachState:
    """
    Saved snapshot with demo data filling whatever part is missing.

    program, sessions and clients fall back independently, so an old snapshot
    without clients still keeps its program and sessions.
    """
    data = _read_raw(store, key) or {}
    try:
        program = (
            Program.model_validate(data["program"])
            if data.get("program") is not None else seed_program()
        )
        sessions = (
            [Session.model_validate(s) for s in data["sessions"]]
            if data.get("sessions") is not None else seed_sessions()
        )
        clients = (
            [Client.model_validate(c) for c in data["clients"]]
            if data.get("clients") is not None else seed_clients()
        )
    except (ValidationError, TypeError) as e:
        print(f"  ⚠️ Snapshot '{key}' unreadable — starting from demo data ({e})")
        return CoachState(program=seed_program(), sessions=seed_sessions(), clients=seed_clients())
    return CoachState(program=program, sessions=sessions, clients=clients)


def save_state(store: StateStore, state: CoachState, key: str = STORAGE_KEY) -> None:
    store.set(key, state.model_dump_json())


def reset_state(store: StateStore, key: str = STORAGE_KEY) -> None:
    store.remove(key)
