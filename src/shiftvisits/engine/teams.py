"""
Team Assignment Engine
======================
Assigns team names from a 4-slot configuration keyed on shift type and
the parity of the shift date's day of month.
"""
from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, Union

from shiftvisits.models.shift import day_of_month, is_even_day
from shiftvisits.models.team_config import TeamConfig
from shiftvisits.models.validated import ValidatedTeamConfig
from shiftvisits.models.visit import Visit
from shiftvisits.utils.logging_setup import get_logger

logger = get_logger("shiftvisits.engine.teams")

ConfigInput = Union[TeamConfig, ValidatedTeamConfig, Mapping[str, Any]]


def _as_config(config: ConfigInput) -> TeamConfig:
    if isinstance(config, TeamConfig):
        return config
    if isinstance(config, ValidatedTeamConfig):
        return config.to_dataclass()
    return TeamConfig.from_dict(config)


def shift_day_of_month(shift_date: str) -> Optional[int]:
    """Day of month from a DD/MM/YYYY shift date, None if unparseable."""
    return day_of_month(shift_date)


def team_for_visit(visit: Visit, config: TeamConfig) -> Optional[str]:
    """
    Team the configuration selects for a visit.

    Returns None when the shift date is not three '/' parts or the selected
    slot is empty/whitespace-only. A non-numeric day selects the odd slot.
    """
    is_even = is_even_day(visit.shift_date)
    if is_even is None:
        return None
    team = config.team_for(visit.shift_type, is_even)
    if not team or not team.strip():
        return None
    return team


def assign_teams(visits: Iterable[Visit], config: ConfigInput) -> List[Visit]:
    """
    Apply the parity rule to every visit.

    Returns new Visit objects in input order; the input is left untouched.
    Visits whose slot is unconfigured keep their current team, and visits
    whose shift date is not three '/' parts pass through unchanged.
    """
    cfg = _as_config(config)
    out = []
    assigned = skipped = kept = 0
    for v in visits:
        if is_even_day(v.shift_date) is None:
            skipped += 1
            out.append(replace(v))
            continue
        team = team_for_visit(v, cfg)
        if team is None:
            kept += 1
            out.append(replace(v))
        else:
            assigned += 1
            out.append(replace(v, team=team))

    if skipped:
        logger.warning(f"Skipped {skipped} visit(s) with unparseable shift date")
    logger.debug(f"Team assignment: assigned={assigned} kept={kept} skipped={skipped}")
    return out
