"""
Session State
=============
Caller-held visit collection with processing status and view mode.
Engine calls go through here so that a failed upload never replaces the
collection the operator is working on.
"""
from enum import Enum
from typing import Any, List, Mapping, Optional, Union

from shiftvisits.engine.enrich import enrich
from shiftvisits.engine.teams import assign_teams
from shiftvisits.engine.update import update_visit
from shiftvisits.errors import VisitError
from shiftvisits.io.extraction import VisitExtractor, extract_visits
from shiftvisits.models.team_config import TeamConfig
from shiftvisits.models.visit import Visit, VisitField
from shiftvisits.utils.logging_setup import get_logger

logger = get_logger("shiftvisits.session")


class ProcessingStatus(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


class ViewMode(str, Enum):
    DATA_ENTRY = "DATA_ENTRY"
    ANALYTICS = "ANALYTICS"


class VisitSession:
    """Owns the visit collection for one operator session."""

    def __init__(self):
        self.visits: List[Visit] = []
        self.status = ProcessingStatus.IDLE
        self.error_message: Optional[str] = None
        self.view_mode = ViewMode.DATA_ENTRY

    def process_document(self, extractor: VisitExtractor, document: bytes) -> bool:
        """
        Extract and enrich a document, installing the result on success.

        On failure the error message is kept verbatim for the operator and
        the previous visits are left in place.

        Returns:
            True if the collection was replaced
        """
        self.status = ProcessingStatus.PROCESSING
        self.error_message = None
        try:
            visits = enrich(extract_visits(extractor, document))
        except VisitError as e:
            logger.error(f"Document processing failed: {e}")
            self.status = ProcessingStatus.ERROR
            self.error_message = str(e)
            return False

        self.visits = visits
        self.status = ProcessingStatus.SUCCESS
        return True

    def update_visit(self, visit_id: str, field: Union[VisitField, str], value: str) -> None:
        self.visits = update_visit(self.visits, visit_id, field, value)

    def auto_assign_teams(self, config: Union[TeamConfig, Mapping[str, Any]]) -> None:
        self.visits = assign_teams(self.visits, config)

    def set_view_mode(self, mode: Union[ViewMode, str]) -> None:
        self.view_mode = ViewMode(mode)

    def reset(self) -> None:
        """Discard the collection and return to the initial state."""
        self.__init__()
