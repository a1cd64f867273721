"""
Visit Analytics
===============
Aggregations behind the analytics charts. Single source for the chart
series, the Excel summary sheet and the JSON export.
"""
from dataclasses import dataclass
from typing import Any, Dict, List

import pandas as pd

from shiftvisits.errors import MalformedRecordError
from shiftvisits.models.shift import ShiftType, parse_date
from shiftvisits.models.visit import Visit

UNASSIGNED = "Unassigned"


@dataclass
class ChartData:
    """One bar/slice of a chart."""
    name: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}


def _frame(visits: List[Visit]) -> pd.DataFrame:
    rows = [
        {
            "location": v.location,
            "team": v.team.strip() or UNASSIGNED,
            "shift_type": v.shift_type.value,
            "shift_date": v.shift_date,
        }
        for v in visits
    ]
    return pd.DataFrame(rows, columns=["location", "team", "shift_type", "shift_date"])


def _counts(visits: List[Visit], column: str) -> List[ChartData]:
    """Counts per value, largest first, ties by name."""
    df = _frame(visits)
    if df.empty:
        return []
    counts = df[column].value_counts()
    items = sorted(counts.items(), key=lambda kv: (-kv[1], str(kv[0])))
    return [ChartData(name=str(k), value=int(n)) for k, n in items]


def visits_by_shift_type(visits: List[Visit]) -> List[ChartData]:
    return _counts(visits, "shift_type")


def visits_by_team(visits: List[Visit]) -> List[ChartData]:
    """Visits per team; visits without a team are grouped as 'Unassigned'."""
    return _counts(visits, "team")


def visits_by_location(visits: List[Visit]) -> List[ChartData]:
    return _counts(visits, "location")


def _date_key(s: str):
    """Sort key: parseable dates chronologically, the rest after them by name."""
    try:
        return (0, parse_date(s).isoformat(), s)
    except MalformedRecordError:
        return (1, "", s)


def visits_by_shift_date(visits: List[Visit]) -> List[ChartData]:
    """Visits per shift date in calendar order; unparseable dates last."""
    df = _frame(visits)
    if df.empty:
        return []
    counts = df["shift_date"].value_counts()
    keys = sorted(counts.index, key=_date_key)
    return [ChartData(name=k, value=int(counts[k])) for k in keys]


def summarize(visits: List[Visit]) -> Dict[str, Any]:
    """Headline numbers for a visit collection."""
    total = len(visits)
    nights = sum(1 for v in visits if v.shift_type == ShiftType.NOTURNO)
    assigned = sum(1 for v in visits if v.team.strip())
    dates = [d for d in visits_by_shift_date(visits) if _date_key(d.name)[0] == 0]
    return {
        "total": total,
        "day_shifts": total - nights,
        "night_shifts": nights,
        "locations": len({v.location for v in visits}),
        "assigned": assigned,
        "unassigned": total - assigned,
        "first_date": dates[0].name if dates else None,
        "last_date": dates[-1].name if dates else None,
    }
