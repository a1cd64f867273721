"""Tests for the team assignment engine."""
import pytest

from shiftvisits.engine.teams import assign_teams, shift_day_of_month, team_for_visit
from shiftvisits.models.shift import ShiftType
from shiftvisits.models.team_config import TeamConfig
from shiftvisits.models.validated import ValidatedTeamConfig
from shiftvisits.models.visit import Visit


def _visit(shift_date="14/03/2024", shift_type=ShiftType.DIURNO, team="", vid="x"):
    return Visit(id=vid, date=shift_date, time="10:00:00", location="Site A",
                 shift_date=shift_date, shift_type=shift_type, team=team)


class TestAssignTeams:
    """Tests for assign_teams()."""

    def test_even_day_shift_gets_day_even(self):
        cfg = TeamConfig(day_even="Alpha", day_odd="Beta")
        out = assign_teams([_visit("14/03/2024", ShiftType.DIURNO)], cfg)
        assert out[0].team == "Alpha"

    def test_empty_slot_keeps_manual_team(self):
        cfg = TeamConfig(day_odd="Beta")
        out = assign_teams([_visit("14/03/2024", ShiftType.DIURNO, team="Manual")], cfg)
        assert out[0].team == "Manual"

    def test_whitespace_slot_keeps_manual_team(self):
        cfg = TeamConfig(day_even="   ")
        out = assign_teams([_visit(team="Manual")], cfg)
        assert out[0].team == "Manual"

    def test_bad_shift_date_passes_through(self, full_config):
        v = _visit("bad-date", team="Keep")
        out = assign_teams([v], full_config)
        assert out[0] == v

    def test_non_numeric_day_uses_odd_slot(self):
        cfg = TeamConfig(day_even="Alpha", day_odd="Beta")
        out = assign_teams([_visit("xx/03/2024", team="Keep")], cfg)
        assert out[0].team == "Beta"

    def test_non_numeric_day_odd_slot_empty_keeps_team(self):
        cfg = TeamConfig(day_even="Alpha")
        out = assign_teams([_visit("xx/03/2024", team="Keep")], cfg)
        assert out[0].team == "Keep"

    def test_all_four_slots(self, sample_visits, full_config):
        out = assign_teams(sample_visits, full_config)
        # v1 even/day, v2 even/night, v3 odd/night, v4 odd/day
        assert [v.team for v in out] == ["Alpha", "Gamma", "Delta", "Beta"]

    def test_preserves_order_ids_and_source_fields(self, sample_visits, full_config):
        out = assign_teams(sample_visits, full_config)
        assert [v.id for v in out] == [v.id for v in sample_visits]
        for before, after in zip(sample_visits, out):
            assert (after.date, after.time, after.location) == (before.date, before.time, before.location)
            assert after.shift_type == before.shift_type

    def test_input_not_mutated(self, sample_visits, full_config):
        teams_before = [v.team for v in sample_visits]
        assign_teams(sample_visits, full_config)
        assert [v.team for v in sample_visits] == teams_before

    def test_idempotent(self, sample_visits, full_config):
        once = assign_teams(sample_visits, full_config)
        twice = assign_teams(once, full_config)
        assert once == twice

    def test_team_name_stored_as_given(self):
        out = assign_teams([_visit()], TeamConfig(day_even=" Alpha "))
        assert out[0].team == " Alpha "

    def test_accepts_mapping_config(self):
        out = assign_teams([_visit()], {"dayEven": "Alpha", "dayOdd": "", "nightEven": "", "nightOdd": ""})
        assert out[0].team == "Alpha"

    def test_accepts_validated_config(self):
        out = assign_teams([_visit("13/03/2024")], ValidatedTeamConfig(dayOdd="Beta"))
        assert out[0].team == "Beta"

    def test_empty_collection(self, full_config):
        assert assign_teams([], full_config) == []

    def test_night_shift_uses_shift_date_parity(self):
        cfg = TeamConfig(night_even="Gamma", night_odd="Delta")
        out = assign_teams([_visit("01/04/2024", ShiftType.NOTURNO)], cfg)
        assert out[0].team == "Delta"


class TestHelpers:
    """Tests for helper functions."""

    @pytest.mark.parametrize("value,expected", [
        ("14/03/2024", 14),
        ("01/03/2024", 1),
        ("bad-date", None),
        ("a/b/c", None),
    ])
    def test_shift_day_of_month(self, value, expected):
        assert shift_day_of_month(value) == expected

    def test_team_for_visit_none_when_unconfigured(self):
        assert team_for_visit(_visit(), TeamConfig()) is None

    def test_team_for_visit_non_numeric_day(self, full_config):
        assert team_for_visit(_visit("??/03/2024", ShiftType.NOTURNO), full_config) == "Delta"

    def test_team_for_visit_not_three_parts(self, full_config):
        assert team_for_visit(_visit("14-03-2024"), full_config) is None
