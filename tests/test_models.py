"""
Tests for record coercion — every loose value becomes a number once, here.
"""
import datetime as dt

import pytest


class TestSafeNumber:

    @pytest.mark.parametrize("value", [None, "", "abc", [], {}, float("nan"), float("inf"), "-inf"])
    def test_unusable_becomes_zero(self, value):
        from coach_mvp.models import safe_number
        assert safe_number(value) == 0

    def test_numeric_strings(self):
        from coach_mvp.models import safe_number
        assert safe_number(" 7.5 ") == 7.5
        assert safe_number("120") == 120

    def test_int_truncates(self):
        from coach_mvp.models import safe_int
        assert safe_int("3.7") == 3
        assert safe_int(-2.5) == -2

    def test_huge_int_becomes_zero(self):
        """Ints beyond float range (valid JSON) overflow float()."""
        from coach_mvp.models import safe_int, safe_number
        assert safe_number(10**400) == 0
        assert safe_int(-(10**400)) == 0


class TestExerciseEntry:

    def test_missing_fields_default(self):
        from coach_mvp.models import ExerciseEntry
        ex = ExerciseEntry.model_validate({})
        assert (ex.name, ex.sets, ex.reps, ex.load, ex.rpe, ex.rest) == ("", 0, 0, 0, 0, 0)
        assert ex.tempo == "2-0-1"

    def test_loose_values_coerced(self):
        from coach_mvp.models import ExerciseEntry
        ex = ExerciseEntry.model_validate({
            "name": None, "sets": "abc", "reps": "5", "load": float("nan"),
            "rpe": "8", "rest": "90", "tempo": "   ",
        })
        assert ex.name == ""
        assert ex.sets == 0
        assert ex.reps == 5
        assert ex.load == 0
        assert ex.rpe == 8
        assert ex.rest == 90
        assert ex.tempo == "2-0-1"

    def test_non_string_tempo_defaults(self):
        from coach_mvp.models import ExerciseEntry
        assert ExerciseEntry(tempo=None).tempo == "2-0-1"

    def test_unknown_keys_ignored(self):
        from coach_mvp.models import ExerciseEntry
        ex = ExerciseEntry.model_validate({"name": "Row", "color": "red"})
        assert ex.name == "Row"
        assert not hasattr(ex, "color")


class TestSession:

    def test_iso_datetime_cut_to_date(self):
        from coach_mvp.models import Session
        s = Session.model_validate({"date": "2026-02-12T08:15:00.000Z"})
        assert s.date == dt.date(2026, 2, 12)

    def test_datetime_object(self):
        from coach_mvp.models import Session
        s = Session(date=dt.datetime(2026, 2, 12, 23, 59))
        assert s.date == dt.date(2026, 2, 12)

    def test_generated_ids_are_unique(self):
        from coach_mvp.models import Session
        assert Session(date="2026-02-12").id != Session(date="2026-02-12").id

    def test_missing_date_rejected(self):
        from pydantic import ValidationError
        from coach_mvp.models import Session
        with pytest.raises(ValidationError):
            Session.model_validate({"exercises": []})


class TestDerived:

    def test_metrics_are_frozen(self):
        from pydantic import ValidationError
        from coach_mvp.models import SessionMetrics
        m = SessionMetrics(volume_kg=1)
        with pytest.raises(ValidationError):
            m.volume_kg = 2
