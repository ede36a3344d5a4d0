"""Display-ready projections of weight entries."""

from dataclasses import dataclass, field

from weight_tracker.domain.weights import DateWindow


@dataclass(frozen=True)
class SeriesPoint:
    """A chart point in the selected unit."""

    date: str
    label: str
    value: float


@dataclass(frozen=True)
class TableRow:
    """A table row; imperial columns or kg are filled depending on unit."""

    id: int
    date: str
    label: str
    pounds: float
    stones: int | None = None
    stones_pounds: float | None = None
    decimal_stones: float | None = None
    kg: float | None = None


@dataclass
class Dashboard:
    """Everything needed to render the chart, table and goal overlay."""

    window: DateWindow
    points: list[SeriesPoint]
    rows: list[TableRow]
    goal_pounds: float | None
    goal_value: float | None
    goal_label: str | None
    errors: list[str] = field(default_factory=list)
