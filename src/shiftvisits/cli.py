from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from shiftvisits.analytics.summary import summarize
from shiftvisits.engine.enrich import enrich
from shiftvisits.engine.teams import assign_teams
from shiftvisits.errors import VisitError
from shiftvisits.io.csv_loader import save_visits
from shiftvisits.io.excel_export import export_to_excel
from shiftvisits.io.extraction import CsvVisitExtractor, extract_visits
from shiftvisits.io.results_export import export_results
from shiftvisits.models.validated import ValidatedTeamConfig
from shiftvisits.utils.logging_setup import get_logger, setup_logging

logger = get_logger("shiftvisits.cli")

_SLOTS = ("day_even", "day_odd", "night_even", "night_odd")


def _build_team_cfg(args: argparse.Namespace) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {}
    if args.team_config:
        with open(args.team_config, encoding="utf-8") as f:
            cfg.update(ValidatedTeamConfig(**json.load(f)).model_dump())
    # Flags override the file
    for slot in _SLOTS:
        value = getattr(args, slot)
        if value is not None:
            cfg[slot] = value
    return cfg


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Classify shift visits and assign teams")
    p.add_argument("--csv", required=True, help="CSV of raw visits (date,time,location)")
    p.add_argument("--team-config", help="JSON file with dayEven/dayOdd/nightEven/nightOdd")
    p.add_argument("--day-even", dest="day_even", help="Team for day shifts on even days")
    p.add_argument("--day-odd", dest="day_odd", help="Team for day shifts on odd days")
    p.add_argument("--night-even", dest="night_even", help="Team for night shifts on even days")
    p.add_argument("--night-odd", dest="night_odd", help="Team for night shifts on odd days")
    p.add_argument("--out-csv", help="Write enriched visits to CSV")
    p.add_argument("--out-xlsx", help="Write enriched visits to Excel")
    p.add_argument("--out-json", help="Write visits and summary to JSON")
    p.add_argument("--json", dest="json_out", action="store_true", help="Print summary as JSON")
    p.add_argument("--log-file", help="Also log to this file")
    p.add_argument("-v", "--verbose", action="count", default=0)
    args = p.parse_args(argv)

    level = "DEBUG" if args.verbose > 1 else "INFO" if args.verbose else "WARNING"
    setup_logging(level=level, log_file=args.log_file)

    try:
        team_cfg = ValidatedTeamConfig(**_build_team_cfg(args)).to_dataclass()
    except (OSError, TypeError, json.JSONDecodeError, ValidationError) as e:
        print(f"Error: invalid team configuration: {e}")
        return 2

    try:
        raws = extract_visits(CsvVisitExtractor(), Path(args.csv).read_bytes())
        visits = enrich(raws)
    except OSError as e:
        print(f"Error: cannot read {args.csv}: {e}")
        return 1
    except VisitError as e:
        print(f"Error: {e}")
        return 1

    if not team_cfg.is_empty:
        visits = assign_teams(visits, team_cfg)

    if args.out_csv:
        save_visits(visits, args.out_csv)
    if args.out_xlsx:
        export_to_excel(visits, args.out_xlsx)
    if args.out_json:
        export_results(visits, args.out_json, None if team_cfg.is_empty else team_cfg)

    summary = summarize(visits)
    if args.json_out:
        print(json.dumps({"summary": summary}, ensure_ascii=False, indent=2))
    else:
        print("Summary:")
        for k, v in summary.items():
            print(f" - {k}: {v}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
