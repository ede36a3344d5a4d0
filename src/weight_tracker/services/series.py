"""Chart and table projections of weight entries."""

from collections.abc import Iterable
from datetime import date

from weight_tracker.domain.series import SeriesPoint, TableRow
from weight_tracker.domain.weights import Unit, WeightEntry
from weight_tracker.services.conversions import (
    pounds_to_decimal_stones,
    pounds_to_kg,
    pounds_to_stones,
)

_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_display_date(iso_date: str) -> str:
    """Format an ISO date as ``dd MMM yyyy``, e.g. ``10 Jan 2024``."""
    day = date.fromisoformat(iso_date)
    month = _MONTH_ABBREVIATIONS[day.month - 1]
    return f"{day.day:02d} {month} {day.year:04d}"


def sort_entries(entries: Iterable[WeightEntry]) -> list[WeightEntry]:
    """Return entries in ascending date order, keeping same-day order."""
    return sorted(entries, key=lambda entry: entry.date)


def display_value(pounds: float, unit: Unit | str) -> float:
    """Return the chart value for a canonical weight in the given unit."""
    if Unit(unit) is Unit.METRIC:
        return pounds_to_kg(pounds)
    return pounds_to_decimal_stones(pounds)


def build_chart_points(
    entries: Iterable[WeightEntry], unit: Unit | str
) -> list[SeriesPoint]:
    """Project entries into sorted chart points."""
    return [
        SeriesPoint(
            date=entry.date,
            label=format_display_date(entry.date),
            value=display_value(entry.pounds, unit),
        )
        for entry in sort_entries(entries)
    ]


def build_table_row(entry: WeightEntry, unit: Unit | str) -> TableRow:
    """Project a single entry into a table row."""
    label = format_display_date(entry.date)
    if Unit(unit) is Unit.METRIC:
        return TableRow(
            id=entry.id,
            date=entry.date,
            label=label,
            pounds=entry.pounds,
            kg=pounds_to_kg(entry.pounds),
        )
    split = pounds_to_stones(entry.pounds)
    return TableRow(
        id=entry.id,
        date=entry.date,
        label=label,
        pounds=entry.pounds,
        stones=split.stones,
        stones_pounds=split.pounds,
        decimal_stones=pounds_to_decimal_stones(entry.pounds),
    )


def build_table_rows(
    entries: Iterable[WeightEntry], unit: Unit | str
) -> list[TableRow]:
    """Project entries into sorted table rows."""
    return [build_table_row(entry, unit) for entry in sort_entries(entries)]
