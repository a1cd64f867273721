# shiftvisits/engine - Pure transforms over visit collections
from .enrich import classify_shift, enrich, new_visit_id
from .teams import assign_teams, shift_day_of_month, team_for_visit
from .update import find_visit, update_visit

__all__ = [
    "enrich", "classify_shift", "new_visit_id",
    "assign_teams", "shift_day_of_month", "team_for_visit",
    "update_visit", "find_visit",
]
