"""Tests for the enrichment engine."""
import logging

import pytest

from shiftvisits.engine.enrich import classify_shift, enrich, new_visit_id
from shiftvisits.errors import MalformedRecordError
from shiftvisits.models.shift import ShiftType
from shiftvisits.models.visit import RawVisit


class TestClassifyShift:
    """Tests for time-of-day classification."""

    def test_day_window_is_half_open(self):
        assert classify_shift("07:00:00") == ShiftType.DIURNO
        assert classify_shift("06:59:59") == ShiftType.NOTURNO
        assert classify_shift("19:00:00") == ShiftType.NOTURNO
        assert classify_shift("18:59:59") == ShiftType.DIURNO

    def test_classification_is_stable(self):
        assert all(classify_shift("03:00:00") == ShiftType.NOTURNO for _ in range(5))


class TestEnrich:
    """Tests for enrich()."""

    def test_night_shift_keeps_start_date(self):
        visits = enrich([RawVisit(date="15/03/2024", time="22:00:00", location="Site A")])
        assert visits[0].shift_type == ShiftType.NOTURNO
        assert visits[0].shift_date == "15/03/2024"

    def test_early_morning_shift_has_no_rollover(self):
        visits = enrich([RawVisit(date="16/03/2024", time="01:00:00", location="Site A")])
        assert visits[0].shift_type == ShiftType.NOTURNO
        assert visits[0].shift_date == "16/03/2024"

    def test_preserves_order_and_cardinality(self, sample_raw_visits):
        visits = enrich(sample_raw_visits)
        assert len(visits) == len(sample_raw_visits)
        assert [v.raw for v in visits] == sample_raw_visits

    def test_ids_unique_and_non_empty(self, sample_raw_visits):
        visits = enrich(sample_raw_visits + sample_raw_visits)
        ids = [v.id for v in visits]
        assert all(ids)
        assert len(set(ids)) == len(ids)

    def test_ids_not_reused_across_calls(self, sample_raw_visits):
        first = {v.id for v in enrich(sample_raw_visits)}
        second = {v.id for v in enrich(sample_raw_visits)}
        assert first.isdisjoint(second)

    def test_team_starts_empty(self, sample_raw_visits):
        assert all(v.team == "" for v in enrich(sample_raw_visits))

    def test_empty_input(self):
        assert enrich([]) == []

    def test_accepts_mappings(self):
        visits = enrich([{"date": "14/03/2024", "time": "09:00:00", "location": "Depot"}])
        assert visits[0].location == "Depot"
        assert visits[0].shift_type == ShiftType.DIURNO

    def test_accepts_generator(self, sample_raw_visits):
        assert len(enrich(r for r in sample_raw_visits)) == 4

    def test_does_not_modify_input(self, sample_raw_visits):
        before = list(sample_raw_visits)
        enrich(sample_raw_visits)
        assert sample_raw_visits == before


class TestEnrichMalformed:
    """Malformed input rejects the whole batch."""

    def test_malformed_time_rejects_batch(self, sample_raw_visits):
        bad = sample_raw_visits + [RawVisit(date="15/03/2024", time="7h30", location="X")]
        with pytest.raises(MalformedRecordError, match="record 4"):
            enrich(bad)

    def test_malformed_date_rejects_batch(self):
        with pytest.raises(MalformedRecordError, match="DD/MM/YYYY"):
            enrich([RawVisit(date="2024-03-15", time="08:00:00", location="X")])

    def test_all_problems_reported(self):
        bad = [
            RawVisit(date="32/01/2024", time="08:00:00", location="X"),
            RawVisit(date="01/01/2024", time="25:00:00", location="Y"),
        ]
        with pytest.raises(MalformedRecordError) as exc_info:
            enrich(bad)
        assert len(exc_info.value.problems) == 2
        assert exc_info.value.problems[0].startswith("record 0")
        assert exc_info.value.problems[1].startswith("record 1")

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            enrich([RawVisit(date="", time="", location="")])

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(MalformedRecordError):
                enrich([RawVisit(date="bad", time="08:00:00", location="X")])
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "enrich raised: MalformedRecordError" in errors[0].getMessage()


def test_new_visit_id_is_fresh():
    assert new_visit_id() != new_visit_id()
