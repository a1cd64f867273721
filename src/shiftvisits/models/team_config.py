"""Team assignment configuration."""
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .shift import ShiftType

# camelCase keys used by the presentation layer
_CAMEL_KEYS = {
    "dayEven": "day_even",
    "dayOdd": "day_odd",
    "nightEven": "night_even",
    "nightOdd": "night_odd",
}


@dataclass
class TeamConfig:
    """
    Team names per (shift type, day-of-month parity) slot.

    An empty or whitespace-only slot means "no assignment for this slot".
    """
    day_even: str = ""
    day_odd: str = ""
    night_even: str = ""
    night_odd: str = ""

    def team_for(self, shift_type: ShiftType, is_even: bool) -> str:
        """Configured team name for a slot (may be empty)."""
        if shift_type == ShiftType.DIURNO:
            return self.day_even if is_even else self.day_odd
        return self.night_even if is_even else self.night_odd

    @property
    def is_empty(self) -> bool:
        return not any(s.strip() for s in self.to_dict().values())

    def to_dict(self) -> Dict[str, str]:
        """Serialize to dictionary (camelCase keys)."""
        return {
            "dayEven": self.day_even,
            "dayOdd": self.day_odd,
            "nightEven": self.night_even,
            "nightOdd": self.night_odd,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "TeamConfig":
        """Create from dictionary with camelCase or snake_case keys."""
        cfg = cls()
        for key, value in d.items():
            attr = _CAMEL_KEYS.get(key, key)
            if hasattr(cfg, attr):
                setattr(cfg, attr, "" if value is None else str(value))
        return cfg
