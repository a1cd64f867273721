# shiftvisits/analytics - Chart series and summaries
from .summary import (
    UNASSIGNED,
    ChartData,
    summarize,
    visits_by_location,
    visits_by_shift_date,
    visits_by_shift_type,
    visits_by_team,
)

__all__ = [
    "ChartData", "UNASSIGNED", "summarize",
    "visits_by_shift_type", "visits_by_team",
    "visits_by_location", "visits_by_shift_date",
]
