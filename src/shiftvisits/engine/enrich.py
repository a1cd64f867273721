"""
Enrichment Engine
=================
Turns raw extracted visits into classified, identity-bearing visits.

Every visit keeps the literal date printed on the source record as its
shift date; a night shift running past midnight still belongs to the
date it started on.
"""
import uuid
from typing import Any, Iterable, List, Mapping, Union

from shiftvisits.errors import MalformedRecordError
from shiftvisits.models.shift import ShiftType, parse_date
from shiftvisits.models.visit import RawVisit, Visit
from shiftvisits.utils.logging_setup import get_logger, log_function_call

logger = get_logger("shiftvisits.engine.enrich")

RawInput = Union[RawVisit, Mapping[str, Any]]


def new_visit_id() -> str:
    """Fresh opaque identifier; never reused."""
    return uuid.uuid4().hex


def classify_shift(time_str: str) -> ShiftType:
    """DIURNO for [07:00:00, 19:00:00), NOTURNO otherwise."""
    return ShiftType.from_time(time_str)


def _as_raw(item: RawInput) -> RawVisit:
    if isinstance(item, RawVisit):
        return item
    return RawVisit.from_dict(item)


@log_function_call
def enrich(raw_visits: Iterable[RawInput]) -> List[Visit]:
    """
    Classify a batch of raw visits.

    The whole batch is validated before any visit is built: one malformed
    date or time rejects the call with a MalformedRecordError listing every
    offending record, so no partially classified output is ever returned.

    Args:
        raw_visits: RawVisit objects or mappings with date/time/location

    Returns:
        One Visit per input record, in input order
    """
    raws = [_as_raw(r) for r in raw_visits]

    problems = []
    shift_types = []
    for idx, raw in enumerate(raws):
        try:
            parse_date(raw.date)
        except MalformedRecordError as e:
            problems.append(f"record {idx}: {e}")
        try:
            shift_types.append(classify_shift(raw.time))
        except MalformedRecordError as e:
            problems.append(f"record {idx}: {e}")

    if problems:
        raise MalformedRecordError(
            f"{len(problems)} malformed field(s) in visit batch: " + "; ".join(problems),
            problems,
        )

    visits = [
        Visit(
            id=new_visit_id(),
            date=raw.date,
            time=raw.time,
            location=raw.location,
            shift_date=raw.date,
            shift_type=shift_type,
            team="",
        )
        for raw, shift_type in zip(raws, shift_types)
    ]

    nights = sum(1 for v in visits if v.shift_type.is_night)
    logger.info(f"Enriched {len(visits)} visits ({len(visits) - nights} day, {nights} night)")
    return visits
