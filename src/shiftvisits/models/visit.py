"""Raw and enriched visit records."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .shift import ShiftType, day_of_month


@dataclass(frozen=True)
class RawVisit:
    """A visit as extracted from a source document: no identity, never mutated."""
    date: str      # DD/MM/YYYY
    time: str      # HH:mm:ss
    location: str

    def to_dict(self) -> Dict[str, str]:
        return {"date": self.date, "time": self.time, "location": self.location}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "RawVisit":
        """Create from a mapping with date/time/location keys."""
        return cls(
            date=str(d.get("date", "")),
            time=str(d.get("time", "")),
            location=str(d.get("location", "")),
        )


@dataclass
class Visit:
    """A classified, identity-bearing visit."""
    id: str
    date: str
    time: str
    location: str
    shift_date: str
    shift_type: ShiftType
    team: str = field(default="")

    def __post_init__(self):
        if not isinstance(self.shift_type, ShiftType):
            self.shift_type = ShiftType(str(self.shift_type).strip().upper())

    @property
    def raw(self) -> RawVisit:
        return RawVisit(date=self.date, time=self.time, location=self.location)

    @property
    def day_of_month(self) -> Optional[int]:
        """Day of month of the shift date, or None when unparseable."""
        return day_of_month(self.shift_date)

    def to_dict(self) -> Dict[str, str]:
        """Serialize with the camelCase keys the presentation layer expects."""
        return {
            "id": self.id,
            "date": self.date,
            "time": self.time,
            "location": self.location,
            "team": self.team,
            "shiftDate": self.shift_date,
            "shiftType": self.shift_type.value,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Visit":
        """Create from a dict with camelCase or snake_case keys."""
        return cls(
            id=str(d["id"]),
            date=str(d.get("date", "")),
            time=str(d.get("time", "")),
            location=str(d.get("location", "")),
            team=str(d.get("team", "") or ""),
            shift_date=str(d.get("shiftDate", d.get("shift_date", ""))),
            shift_type=d.get("shiftType", d.get("shift_type")),
        )


class VisitField(str, Enum):
    """Fields an operator may edit on a single visit."""
    TEAM = "team"
    LOCATION = "location"
    SHIFT_DATE = "shift_date"
    SHIFT_TYPE = "shift_type"

    @classmethod
    def from_string(cls, s: str) -> "VisitField":
        """Accept snake_case, camelCase or member names."""
        key = str(s).strip()
        aliases = {"shiftDate": cls.SHIFT_DATE, "shiftType": cls.SHIFT_TYPE}
        if key in aliases:
            return aliases[key]
        for member in cls:
            if key.lower() in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Field {s!r} is not editable")
