# shiftvisits/models - Data models for visits and team configuration
from .shift import (
    DATE_FORMAT,
    DAY_SHIFT_START,
    NIGHT_SHIFT_START,
    TIME_FORMAT,
    ShiftType,
    day_of_month,
    parse_date,
    is_even_day,
    parse_time,
)
from .team_config import TeamConfig
from .validated import ValidatedTeamConfig
from .visit import RawVisit, Visit, VisitField

__all__ = [
    "RawVisit", "Visit", "VisitField",
    "ShiftType", "DAY_SHIFT_START", "NIGHT_SHIFT_START",
    "DATE_FORMAT", "TIME_FORMAT",
    "parse_date", "parse_time", "day_of_month", "is_even_day",
    "TeamConfig", "ValidatedTeamConfig",
]
