"""
Extraction Boundary
===================
Document → raw visits. OCR/PDF extraction lives outside this package;
anything implementing VisitExtractor can be plugged in.
"""
import io
from typing import List, Protocol, Sequence, runtime_checkable

import pandas as pd

from shiftvisits.errors import ExtractionFailure, VisitError
from shiftvisits.io.csv_loader import load_raw_visits
from shiftvisits.models.visit import RawVisit
from shiftvisits.utils.logging_setup import get_logger

logger = get_logger("shiftvisits.io.extraction")

NO_VISITS_MESSAGE = "No visits found. Please check the document format."


@runtime_checkable
class VisitExtractor(Protocol):
    """Turns a document's bytes into raw (date, time, location) records."""

    def extract(self, document: bytes) -> Sequence[RawVisit]:
        ...


def extract_visits(extractor: VisitExtractor, document: bytes) -> List[RawVisit]:
    """
    Run an extractor and require at least one visit.

    Raises:
        ExtractionFailure: the document could not be read or yielded no visits
    """
    try:
        raws = list(extractor.extract(document))
    except VisitError:
        raise
    except ValueError as e:
        # Covers decode errors, pandas parser errors and missing columns
        logger.error(f"Extraction failed: {type(e).__name__}: {e}")
        raise ExtractionFailure(str(e)) from e
    if not raws:
        logger.error("Extraction located no visits in document")
        raise ExtractionFailure(NO_VISITS_MESSAGE)
    logger.info(f"Extracted {len(raws)} raw visits")
    return raws


class CsvVisitExtractor:
    """Extractor for documents that are already a date,time,location CSV."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def extract(self, document: bytes) -> List[RawVisit]:
        text = document.decode(self.encoding)
        try:
            df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return []
        return load_raw_visits(df)
