import argparse
import json
import sys
from dataclasses import asdict
from typing import List, Optional

from gym_traffic.exceptions import GymTrafficError
from gym_traffic.presentation.console import (
    render_day_series,
    render_facilities,
    render_outlook,
    render_status_card,
    render_week_series,
)
from gym_traffic.services.traffic_service import TrafficService
from gym_traffic.utils.config import load_config
from gym_traffic.utils.dates import parse_datetime
from gym_traffic.utils.logger import get_logger

logger = get_logger(__name__)

VIEWS = ["now", "day", "week", "outlook", "facilities"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Campus Gym Traffic Dashboard"
    )

    parser.add_argument(
        "--view",
        choices=VIEWS,
        default="now",
        help="What to show (default: now)",
    )

    parser.add_argument(
        "--facility",
        type=str,
        default=None,
        help="Facility id. Defaults to GYM_DEFAULT_FACILITY.",
    )

    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Day for --view day (YYYY-MM-DD). Defaults to today.",
    )

    parser.add_argument(
        "--week-start",
        type=str,
        default=None,
        help="Sunday starting the week for --view week (YYYY-MM-DD). Defaults to this week.",
    )

    parser.add_argument(
        "--hours",
        type=int,
        default=None,
        help="Number of open hours for --view outlook. Defaults to GYM_OUTLOOK_HOURS.",
    )

    parser.add_argument(
        "--at",
        type=str,
        default=None,
        help="Reference time (ISO datetime) instead of the current clock.",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of text",
    )

    return parser


def _to_json(obj, **extra) -> str:
    payload = asdict(obj) if not isinstance(obj, list) else [asdict(o) for o in obj]
    if extra:
        payload.update(extra)
    return json.dumps(payload, default=str, indent=2)


def run(args: argparse.Namespace, service: TrafficService) -> str:
    facility_id = args.facility or service.config.default_facility
    reference_now = parse_datetime(args.at) if args.at else None

    if args.view == "facilities":
        facilities = service.list_facilities()
        return _to_json(facilities) if args.json else render_facilities(facilities)

    if args.view == "day":
        series = service.get_day_series(facility_id, args.date, reference_now)
        if args.json:
            return _to_json(series, labels=series.labels)
        return render_day_series(series)

    if args.view == "week":
        week = service.get_week_series(facility_id, args.week_start, reference_now)
        summary = service.summarize_week(week)
        if args.json:
            return _to_json(week, labels=week.labels, summary=asdict(summary))
        return render_week_series(week, summary)

    if args.view == "outlook":
        outlook = service.get_outlook(facility_id, args.hours, reference_now)
        if args.json:
            return _to_json(outlook, labels=outlook.labels)
        return render_outlook(outlook)

    card = service.get_current_occupancy(facility_id, reference_now)
    return _to_json(card) if args.json else render_status_card(card)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    service = TrafficService(config=load_config())

    try:
        output = run(args, service)
    except GymTrafficError as e:
        logger.error("Dashboard query failed | view=%s | %s", args.view, e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
