"""Shift visit classification and team assignment."""
from .engine import assign_teams, classify_shift, enrich, update_visit
from .errors import ExtractionFailure, MalformedRecordError, VisitError, VisitNotFoundError
from .models import RawVisit, ShiftType, TeamConfig, Visit, VisitField

__version__ = "1.0.0"

__all__ = [
    "enrich", "classify_shift", "assign_teams", "update_visit",
    "RawVisit", "Visit", "VisitField", "ShiftType", "TeamConfig",
    "VisitError", "ExtractionFailure", "MalformedRecordError", "VisitNotFoundError",
]
