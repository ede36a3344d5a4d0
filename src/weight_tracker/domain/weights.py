"""Domain models for weight entries and goals."""

from dataclasses import dataclass
from enum import StrEnum


class Unit(StrEnum):
    """Display unit selected by the user."""

    IMPERIAL = "imperial"
    METRIC = "metric"


class DisplayStyle(StrEnum):
    """Verbosity of a formatted weight."""

    SHORT = "short"
    LONG = "long"


class DateRange(StrEnum):
    """Named relative windows used to filter the series."""

    LAST_7_DAYS = "7d"
    LAST_MONTH = "1m"
    LAST_3_MONTHS = "3m"
    LAST_6_MONTHS = "6m"
    LAST_9_MONTHS = "9m"
    LAST_YEAR = "1y"
    ALL = "all"


@dataclass(frozen=True)
class WeightEntry:
    """A weight measurement as stored by the persistence server."""

    id: int
    date: str
    pounds: float
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class Goal:
    """The singleton goal weight; pounds is None when no goal is set."""

    pounds: float | None
    updated_at: str | None = None

    @property
    def is_set(self) -> bool:
        """Return True when a goal value exists, including a goal of zero."""
        return self.pounds is not None


@dataclass(frozen=True)
class StonesAndPounds:
    """Decomposition of a canonical pounds value."""

    stones: int
    pounds: float


@dataclass(frozen=True)
class DateWindow:
    """Inclusive ISO date bounds; both None means unbounded."""

    start_date: str | None
    end_date: str | None

    @property
    def is_bounded(self) -> bool:
        """Return True when the window restricts dates."""
        return self.start_date is not None or self.end_date is not None
