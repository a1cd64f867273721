"""Pytest configuration and fixtures."""
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from shiftvisits.models.shift import ShiftType
from shiftvisits.models.team_config import TeamConfig
from shiftvisits.models.visit import RawVisit, Visit


@pytest.fixture
def sample_raw_visits():
    """Raw visits covering both shift types and both parities."""
    return [
        RawVisit(date="14/03/2024", time="08:30:00", location="Site A"),
        RawVisit(date="14/03/2024", time="22:00:00", location="Site B"),
        RawVisit(date="15/03/2024", time="01:15:00", location="Site A"),
        RawVisit(date="15/03/2024", time="18:59:59", location="Site C"),
    ]


@pytest.fixture
def sample_visits():
    """Enriched visits with fixed ids."""
    return [
        Visit(id="v1", date="14/03/2024", time="08:30:00", location="Site A",
              shift_date="14/03/2024", shift_type=ShiftType.DIURNO),
        Visit(id="v2", date="14/03/2024", time="22:00:00", location="Site B",
              shift_date="14/03/2024", shift_type=ShiftType.NOTURNO),
        Visit(id="v3", date="15/03/2024", time="01:15:00", location="Site A",
              shift_date="15/03/2024", shift_type=ShiftType.NOTURNO),
        Visit(id="v4", date="15/03/2024", time="18:59:59", location="Site C",
              shift_date="15/03/2024", shift_type=ShiftType.DIURNO, team="Manual"),
    ]


@pytest.fixture
def full_config():
    """All four slots configured."""
    return TeamConfig(day_even="Alpha", day_odd="Beta", night_even="Gamma", night_odd="Delta")


@pytest.fixture
def raw_csv_path():
    """Path to the sample raw visits file."""
    return Path(__file__).parent / "data" / "raw_visits.csv"


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("shiftvisits")
    for h in logger.handlers:
        h.close()
    logger.handlers.clear()
