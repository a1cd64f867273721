"""Exceptions raised by the visit pipeline."""
from typing import List, Optional


class VisitError(ValueError):
    """Base class for errors surfaced to the operator."""


class ExtractionFailure(VisitError):
    """The extraction step located no visits in a document."""


class MalformedRecordError(VisitError):
    """A raw visit's date or time does not match the expected literal format."""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        super().__init__(message)
        self.problems = list(problems or [])


class VisitNotFoundError(VisitError, KeyError):
    """No visit with the requested id exists in the collection."""

    def __init__(self, visit_id: str):
        super().__init__(f"Visit not found: {visit_id}")
        self.visit_id = visit_id

    def __str__(self):
        return self.args[0]
