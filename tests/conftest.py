"""Test configuration — ensure coach_mvp is importable and share fixtures."""
import sys
from pathlib import Path

import pytest

# Add project root to path so `from coach_mvp.xxx import` works without install
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def squat_5x5():
    """The reference back-squat entry: 5×5 @ 85 kg, RPE 7.5, 150 s rest, 3-0-1."""
    return {"name": "Squat arrière", "sets": 5, "reps": 5, "load": 85,
            "rpe": 7.5, "rest": 150, "tempo": "3-0-1"}
