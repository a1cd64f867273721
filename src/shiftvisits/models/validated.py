"""
Pydantic Validated Models
=========================
Validation layer for team configuration coming from outside the process
(JSON files, CLI flags, form input).

Usage:
    from shiftvisits.models.validated import ValidatedTeamConfig

    cfg = ValidatedTeamConfig(dayEven="Alpha", dayOdd="Beta")
    team_config = cfg.to_dataclass()
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .team_config import TeamConfig

MAX_TEAM_NAME = 100


class ValidatedTeamConfig(BaseModel):
    """
    Pydantic-validated team configuration.

    Use this for strict validation at input boundaries.
    Can be converted to/from the dataclass TeamConfig.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        validate_assignment=True,
    )

    day_even: str = Field(default="", alias="dayEven", max_length=MAX_TEAM_NAME)
    day_odd: str = Field(default="", alias="dayOdd", max_length=MAX_TEAM_NAME)
    night_even: str = Field(default="", alias="nightEven", max_length=MAX_TEAM_NAME)
    night_odd: str = Field(default="", alias="nightOdd", max_length=MAX_TEAM_NAME)

    @field_validator("day_even", "day_odd", "night_even", "night_odd", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        """Treat null slots as unconfigured."""
        return "" if v is None else v

    @field_validator("day_even", "day_odd", "night_even", "night_odd")
    @classmethod
    def single_line(cls, v: str) -> str:
        if "\n" in v or "\r" in v:
            raise ValueError("team name must be a single line")
        return v

    def to_dataclass(self) -> TeamConfig:
        """Convert to dataclass TeamConfig for the assignment engine."""
        return TeamConfig(
            day_even=self.day_even,
            day_odd=self.day_odd,
            night_even=self.night_even,
            night_odd=self.night_odd,
        )

    @classmethod
    def from_dataclass(cls, config: TeamConfig) -> "ValidatedTeamConfig":
        """Create from dataclass TeamConfig."""
        return cls(
            day_even=config.day_even,
            day_odd=config.day_odd,
            night_even=config.night_even,
            night_odd=config.night_odd,
        )
