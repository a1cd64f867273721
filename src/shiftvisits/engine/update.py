"""Manual single-field edits on a visit collection."""
from dataclasses import replace
from typing import Iterable, List, Optional, Union

from shiftvisits.errors import VisitNotFoundError
from shiftvisits.models.shift import ShiftType
from shiftvisits.models.visit import Visit, VisitField
from shiftvisits.utils.logging_setup import get_logger

logger = get_logger("shiftvisits.engine.update")


def find_visit(visits: Iterable[Visit], visit_id: str) -> Optional[Visit]:
    for v in visits:
        if v.id == visit_id:
            return v
    return None


def _coerce(field: VisitField, value: str):
    if field == VisitField.SHIFT_TYPE:
        return value if isinstance(value, ShiftType) else ShiftType(str(value).strip().upper())
    return str(value)


def update_visit(
    visits: Iterable[Visit],
    visit_id: str,
    field: Union[VisitField, str],
    value: str,
    strict: bool = False,
) -> List[Visit]:
    """
    Replace one field of the visit matching visit_id.

    Args:
        visits: Current collection
        visit_id: Id of the visit to edit
        field: Editable field (VisitField or its name)
        value: New value; shift type values must name a ShiftType
        strict: Raise VisitNotFoundError instead of ignoring an unknown id

    Returns:
        New list; every other visit is the same object as before
    """
    if not isinstance(field, VisitField):
        field = VisitField.from_string(field)
    new_value = _coerce(field, value)

    visits = list(visits)
    out = []
    found = False
    for v in visits:
        if v.id == visit_id:
            found = True
            out.append(replace(v, **{field.value: new_value}))
        else:
            out.append(v)

    if not found:
        if strict:
            raise VisitNotFoundError(visit_id)
        logger.warning(f"update_visit: no visit with id {visit_id!r}, collection unchanged")
    else:
        logger.debug(f"Updated {field.value} of visit {visit_id}")
    return out
