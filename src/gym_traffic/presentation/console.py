"""
Plain-text dashboard renderers.

Presentation-layer only:
- No estimation logic
- No clock reads
- Returns text; the CLI decides where it goes
"""

from __future__ import annotations

import io
from typing import List, Optional, Sequence

from gym_traffic.traffic.facility_models import Facility
from gym_traffic.traffic.occupancy_models import (
    DaySeries,
    Outlook,
    StatusCard,
    WeekSeries,
    WeeklySummary,
)
from gym_traffic.utils.hours import format_date_label

BAR_WIDTH = 30


def _format_table(rows: Sequence[Sequence[object]], headers: List[str], max_rows: int | None = None) -> str:
    output = io.StringIO()
    rows = list(rows)

    if max_rows is not None and len(rows) > max_rows:
        shown = rows[:max_rows]
        omitted = len(rows) - max_rows
    else:
        shown = rows
        omitted = 0

    widths = [len(h) for h in headers]
    for row in shown:
        for i, v in enumerate(row):
            widths[i] = max(widths[i], len(str(v)))

    def fmt(r):
        return " ".join(str(r[i]).ljust(widths[i]) for i in range(len(headers))).rstrip()

    print(fmt(headers), file=output)
    print(" ".join("-" * w for w in widths), file=output)
    for row in shown:
        print(fmt(row), file=output)

    if omitted:
        print(f"... ({omitted} more rows omitted) ...", file=output)

    return output.getvalue()


def _bar(value: Optional[int], max_capacity: int) -> str:
    if value is None or not max_capacity:
        return ""
    filled = round(BAR_WIDTH * value / max_capacity)
    return "#" * filled


def _cell(value: Optional[int]) -> str:
    return "-" if value is None else str(value)


def render_facilities(facilities: List[Facility]) -> str:
    rows = [
        (f.id, f.name, f.max_capacity, f.location, f.hours_text)
        for f in facilities
    ]
    return _format_table(rows, ["id", "name", "capacity", "location", "hours"])


def render_status_card(card: StatusCard) -> str:
    sample = card.sample
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(f"{card.facility_name.upper()} - CURRENT TRAFFIC")
    lines.append("=" * 60)
    lines.append(f"As of: {card.timestamp.strftime('%Y-%m-%d %H:%M')}")
    lines.append("")

    if not sample.is_open:
        lines.append("Current Occupancy: CLOSED")
        lines.append("Capacity:          CLOSED")
        lines.append(f"Opens:             {card.next_open_time or 'CLOSED'}")
    else:
        lines.append(f"Current Occupancy: {sample.occupancy} / {sample.max_capacity}")
        lines.append(f"Capacity:          {sample.capacity_percentage}%")
        lines.append(f"Traffic:           {card.status}")
        lines.append(f"Wait Time:         {card.wait_time}")

    lines.append("=" * 60)
    return "\n".join(lines)


def render_day_series(series: DaySeries) -> str:
    out = io.StringIO()

    print("=" * 70, file=out)
    print(f"{series.facility_name.upper()} - {series.day_name.upper()} {series.date.isoformat()}", file=out)
    print(f"Hours: {series.hours_label}", file=out)
    print("=" * 70, file=out)

    max_capacity = series.samples[0].max_capacity if series.samples else 0
    rows = [
        (
            sample.label,
            _cell(series.historical[i]),
            _cell(series.predicted[i]),
            f"{sample.capacity_percentage}%",
            _bar(sample.occupancy, max_capacity),
        )
        for i, sample in enumerate(series.samples)
    ]
    print(_format_table(rows, ["hour", "historical", "predicted", "capacity", ""]), end="", file=out)

    return out.getvalue()


def render_week_series(week: WeekSeries, summary: Optional[WeeklySummary] = None) -> str:
    out = io.StringIO()

    print("=" * 70, file=out)
    print(f"{week.facility_name.upper()} - WEEK OF {week.week_start.isoformat()}", file=out)
    print("=" * 70, file=out)

    rows = [
        (
            day.label,
            format_date_label(day.date),
            _cell(day.value),
            "historical" if day.is_historical else "predicted",
            _bar(day.value, week.max_capacity),
        )
        for day in week.days
    ]
    print(_format_table(rows, ["day", "date", "avg", "type", ""]), end="", file=out)

    if summary is not None:
        print(file=out)
        print(f"Average Occupancy: {summary.average_occupancy:.1f} ({summary.average_capacity_percentage}%)", file=out)
        print(f"Busiest Day:       {summary.busiest_day}", file=out)
        print(f"Classification:    {summary.classification}", file=out)

    return out.getvalue()


def render_outlook(outlook: Outlook) -> str:
    out = io.StringIO()

    print("=" * 70, file=out)
    print(f"{outlook.facility_name.upper()} - NEXT {len(outlook.samples)} OPEN HOURS", file=out)
    print("=" * 70, file=out)

    if not outlook.samples:
        print("No open hours in the next 24 hours.", file=out)
        return out.getvalue()

    rows = [
        (
            format_date_label(s.date),
            s.label,
            s.occupancy,
            f"{s.capacity_percentage}%",
            _bar(s.occupancy, s.max_capacity),
        )
        for s in outlook.samples
    ]
    print(_format_table(rows, ["date", "hour", "occupancy", "capacity", ""]), end="", file=out)

    return out.getvalue()
