"""
CoachMVP — Configuration

Environment overrides first, then domain constants and demo seed data.
Seed exercises are plain dicts; coach_mvp.models coerces them on load.
"""
import os

# ── Storage / Runtime ────────────────────────────────────────────────
STATE_DIR = os.environ.get("COACHMVP_STATE_DIR", ".coachmvp")
BACKUP_DIR = os.environ.get("COACHMVP_BACKUP_DIR", "backup")
TIMEZONE = os.environ.get("COACHMVP_TIMEZONE", "America/Montreal")

# Snapshot key — bump the suffix if the snapshot shape changes
STORAGE_KEY = "coachmvp_state_v1"

# ── Calculations ─────────────────────────────────────────────────────
DEFAULT_TEMPO = "2-0-1"  # ecc-pause-conc, seconds
TEMPO_DELIMITER = "-"
EPLEY_DIVISOR = 30  # 1RM ≈ load × (1 + reps / 30)

# ── Dashboard ────────────────────────────────────────────────────────
CHART_COLORS = {
    "volume": "#ef4444",
    "intensity": "#fbbf24",
    "duration": "#3b82f6",
}

# ── Templates ────────────────────────────────────────────────────────
DEFAULT_EXERCISE = {
    "name": "Squat arrière",
    "sets": 3,
    "reps": 5,
    "load": 80,   # kg
    "rpe": 7.5,
    "rest": 120,  # sec
    "tempo": DEFAULT_TEMPO,
}

DEFAULT_CLIENT = {"name": "Nouveau client", "email": "", "notes": ""}

# ═════════════════════════════════════════════════════════════════════
# DEMO SEEDS
# ═════════════════════════════════════════════════════════════════════

SEED_PROGRAM = {
    "id": "prog-1",
    "name": "Force – Full Body (3 j/sem)",
    "notes": "Cycle 4 semaines – progression 2.5 kg si RPE <8.",
    "days": [
        {
            "label": "Jour A",
            "exercises": [
                {"name": "Squat arrière", "sets": 5, "reps": 5, "load": 85, "rpe": 7.5, "rest": 150, "tempo": "3-0-1"},
                {"name": "Développé couché", "sets": 5, "reps": 5, "load": 70, "rpe": 8, "rest": 120, "tempo": "2-1-1"},
                {"name": "Row barre", "sets": 4, "reps": 8, "load": 60, "rpe": 7, "rest": 90, "tempo": "2-0-2"},
            ],
        },
        {
            "label": "Jour B",
            "exercises": [
                {"name": "Soulevé de terre", "sets": 4, "reps": 4, "load": 110, "rpe": 7.5, "rest": 180, "tempo": "2-0-1"},
                {"name": "Dév. militaire", "sets": 4, "reps": 6, "load": 45, "rpe": 8, "rest": 120, "tempo": "2-0-1"},
                {"name": "Tractions", "sets": 4, "reps": 6, "load": 0, "rpe": 8, "rest": 90, "tempo": "2-0-1"},
            ],
        },
    ],
}

# (id, days before today, notes, program day index)
SEED_SESSIONS = [
    ("s1", 0, "Bonne énergie", 0),
    ("s0", 7, "RPE hauts", 1),
]

SEED_CLIENTS = [
    {"id": "c1", "name": "Athlète A", "email": "a@demo.com", "notes": "Hypertrophie"},
]
