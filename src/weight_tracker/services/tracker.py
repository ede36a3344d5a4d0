"""Weight tracker service tying validation, the API and projections together."""

import logging
from dataclasses import dataclass
from datetime import date

from weight_tracker.adapters.weight_api_client import WeightApiClient
from weight_tracker.domain.errors import ConfirmationRequiredError, WeightApiError
from weight_tracker.domain.series import Dashboard
from weight_tracker.domain.weights import DateRange, Goal, Unit, WeightEntry
from weight_tracker.services.date_ranges import resolve_date_range, today_in
from weight_tracker.services.goals import goal_label, goal_value
from weight_tracker.services.series import build_chart_points, build_table_rows
from weight_tracker.services.validation import (
    validate_entry_date,
    validate_weight_input,
)

DELETE_ENTRY_PROMPT = "Are you sure you want to delete this entry?"
CLEAR_GOAL_PROMPT = "Are you sure you want to clear your goal?"

_logger = logging.getLogger(__name__)


@dataclass
class WeightTrackerService:
    """Service for loading the dashboard and relaying weight mutations."""

    client: WeightApiClient
    timezone: str = "UTC"

    def today(self) -> date:
        """Return today's date on the configured clock."""
        return today_in(self.timezone)

    async def load_dashboard(
        self, unit: Unit | str, date_range: DateRange | str
    ) -> Dashboard:
        """Fetch the filtered series and goal and project them for display.

        A failed fetch leaves the series empty or the goal absent and records
        the failure message instead of raising.
        """
        unit = Unit(unit)
        window = resolve_date_range(date_range, today=self.today())
        errors: list[str] = []

        entries: list[WeightEntry] = []
        try:
            entries = await self.client.list_weights(
                window.start_date, window.end_date
            )
        except WeightApiError as exc:
            _logger.exception("Failed to load weights")
            errors.append(exc.message)

        goal_pounds: float | None = None
        try:
            goal_pounds = (await self.client.get_goal()).pounds
        except WeightApiError as exc:
            _logger.exception("Failed to load goal")
            errors.append(exc.message)

        return Dashboard(
            window=window,
            points=build_chart_points(entries, unit),
            rows=build_table_rows(entries, unit),
            goal_pounds=goal_pounds,
            goal_value=goal_value(goal_pounds, unit),
            goal_label=goal_label(goal_pounds, unit),
            errors=errors,
        )

    async def get_entry(self, weight_id: int) -> WeightEntry:
        """Return a single entry."""
        return await self.client.get_weight(weight_id)

    async def add_entry(
        self, entry_date: str | None, stones: object, pounds: object
    ) -> WeightEntry:
        """Validate form input and create an entry."""
        iso_date = validate_entry_date(entry_date, self.today())
        total = validate_weight_input(stones, pounds)
        entry = await self.client.create_weight(iso_date, total)
        _logger.info("Created weight entry id=%s date=%s", entry.id, entry.date)
        return entry

    async def update_entry(
        self, weight_id: int, entry_date: str | None, stones: object, pounds: object
    ) -> WeightEntry:
        """Validate form input and replace an entry's date and weight."""
        iso_date = validate_entry_date(entry_date, self.today())
        total = validate_weight_input(stones, pounds)
        entry = await self.client.update_weight(weight_id, iso_date, total)
        _logger.info("Updated weight entry id=%s date=%s", entry.id, entry.date)
        return entry

    async def delete_entry(self, weight_id: int, *, confirmed: bool) -> None:
        """Delete an entry once the user has confirmed."""
        if not confirmed:
            raise ConfirmationRequiredError(DELETE_ENTRY_PROMPT)
        await self.client.delete_weight(weight_id)
        _logger.info("Deleted weight entry id=%s", weight_id)

    async def get_goal(self) -> Goal:
        """Return the current goal."""
        return await self.client.get_goal()

    async def set_goal(self, stones: object, pounds: object) -> Goal:
        """Validate form input and replace the goal."""
        total = validate_weight_input(stones, pounds)
        goal = await self.client.update_goal(total)
        _logger.info("Set goal weight pounds=%s", goal.pounds)
        return goal

    async def clear_goal(self, *, confirmed: bool) -> Goal:
        """Clear the goal once the user has confirmed."""
        if not confirmed:
            raise ConfirmationRequiredError(CLEAR_GOAL_PROMPT)
        goal = await self.client.update_goal(None)
        _logger.info("Cleared goal weight")
        return goal
