"""CSV loading and saving for visit data."""
from pathlib import Path
from typing import List, Union

import pandas as pd

from shiftvisits.models.visit import RawVisit, Visit

RAW_COLUMNS = ["date", "time", "location"]
VISIT_COLUMNS = ["id", "date", "time", "location", "shiftDate", "shiftType", "team"]


def _read_frame(source: Union[str, Path, pd.DataFrame]) -> pd.DataFrame:
    """Read everything as strings so zero-padded dates and times survive."""
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    else:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)
    df = df.fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    return df


def load_raw_visits(source: Union[str, Path, pd.DataFrame]) -> List[RawVisit]:
    """
    Load raw visits from a CSV file or DataFrame.

    Args:
        source: Path to CSV file or pandas DataFrame with date, time and
            location columns

    Returns:
        List of RawVisit objects, blank rows skipped
    """
    df = _read_frame(source)

    missing = [c for c in RAW_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"CSV must have columns {RAW_COLUMNS}, missing: {missing}")

    raws = []
    for _, row in df.iterrows():
        values = {c: str(row[c]).strip() for c in RAW_COLUMNS}
        if not any(values.values()):
            continue
        raws.append(RawVisit(**values))
    return raws


def visits_to_dataframe(visits: List[Visit]) -> pd.DataFrame:
    """Convert visits to a DataFrame with presentation column names."""
    if not visits:
        return pd.DataFrame(columns=VISIT_COLUMNS)
    return pd.DataFrame([v.to_dict() for v in visits], columns=VISIT_COLUMNS)


def save_visits(visits: List[Visit], path: Union[str, Path]) -> None:
    """Save enriched visits to CSV."""
    visits_to_dataframe(visits).to_csv(path, index=False)


def load_visits(source: Union[str, Path, pd.DataFrame]) -> List[Visit]:
    """Load enriched visits previously written by save_visits."""
    df = _read_frame(source)

    missing = [c for c in VISIT_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"CSV must have columns {VISIT_COLUMNS}, missing: {missing}")

    return [Visit.from_dict({c: str(row[c]) for c in VISIT_COLUMNS}) for _, row in df.iterrows()]
