"""
Results Export
==============
Writes enriched visits and their summary to JSON for scripts and
downstream analysis.
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from shiftvisits.analytics.summary import summarize
from shiftvisits.models.team_config import TeamConfig
from shiftvisits.models.visit import Visit
from shiftvisits.utils.logging_setup import get_logger

logger = get_logger("shiftvisits.io.results_export")


def build_results(visits: List[Visit], config: Optional[TeamConfig] = None) -> Dict[str, Any]:
    """Assemble the JSON-ready results document."""
    results = {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "summary": summarize(visits),
        "visits": [v.to_dict() for v in visits],
    }
    if config is not None:
        results["teamConfig"] = config.to_dict()
    return results


def export_results(
    visits: List[Visit],
    path: Union[str, Path],
    config: Optional[TeamConfig] = None,
) -> Path:
    """
    Export visits and summary to a JSON file.

    Args:
        visits: Enriched visits
        path: Output file (parent directories are created)
        config: Team configuration that was applied, if any

    Returns:
        Path to the exported JSON file
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(build_results(visits, config), f, indent=2, ensure_ascii=False)

    logger.info(f"Results exported to {output_path}")
    return output_path
