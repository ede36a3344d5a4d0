"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request, Response, status
from fastapi.responses import JSONResponse

from weight_tracker.api.models import GoalForm, WeightForm
from weight_tracker.app_logging import configure_logging
from weight_tracker.containers import AppContainer
from weight_tracker.domain.errors import (
    ConfirmationRequiredError,
    WeightApiError,
    WeightInputError,
)
from weight_tracker.domain.series import Dashboard, TableRow
from weight_tracker.domain.weights import DateRange, Goal, Unit
from weight_tracker.services.goals import (
    goal_form_defaults,
    goal_header_label,
    goal_label,
    goal_value,
)
from weight_tracker.services.series import build_table_row


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(WeightInputError)
    async def input_error_handler(
        request: Request, exc: WeightInputError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422, content={"error": exc.message, "field": exc.field}
        )

    @app.exception_handler(ConfirmationRequiredError)
    async def confirmation_error_handler(
        request: Request, exc: ConfirmationRequiredError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"error": exc.message}
        )

    @app.exception_handler(WeightApiError)
    async def api_error_handler(request: Request, exc: WeightApiError) -> JSONResponse:
        logger.warning(
            "Weight API request failed (status=%s): %s", exc.status_code, exc.message
        )
        status_code = status.HTTP_502_BAD_GATEWAY
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            status_code = status.HTTP_404_NOT_FOUND
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard(
        request: Request,
        unit: Unit | None = None,
        date_range: DateRange | None = Query(default=None, alias="range"),
    ) -> dict[str, object]:
        """Return chart points, table rows and the goal overlay."""
        state_container: AppContainer = request.app.state.container
        resolved_unit = unit or settings.default_unit
        resolved_range = date_range or settings.default_range
        summary = await state_container.tracker_service.load_dashboard(
            resolved_unit, resolved_range
        )
        return _dashboard_payload(resolved_unit, resolved_range, summary)

    @app.get("/entries/{weight_id}")
    async def get_entry(
        weight_id: int, request: Request, unit: Unit | None = None
    ) -> TableRow:
        """Return a single entry as a table row."""
        state_container: AppContainer = request.app.state.container
        entry = await state_container.tracker_service.get_entry(weight_id)
        return build_table_row(entry, unit or settings.default_unit)

    @app.post("/entries", status_code=status.HTTP_201_CREATED)
    async def create_entry(
        form: WeightForm, request: Request, unit: Unit | None = None
    ) -> TableRow:
        """Validate and create a weight entry."""
        state_container: AppContainer = request.app.state.container
        entry = await state_container.tracker_service.add_entry(
            form.date, form.stones, form.pounds
        )
        return build_table_row(entry, unit or settings.default_unit)

    @app.put("/entries/{weight_id}")
    async def update_entry(
        weight_id: int, form: WeightForm, request: Request, unit: Unit | None = None
    ) -> TableRow:
        """Validate and replace a weight entry."""
        state_container: AppContainer = request.app.state.container
        entry = await state_container.tracker_service.update_entry(
            weight_id, form.date, form.stones, form.pounds
        )
        return build_table_row(entry, unit or settings.default_unit)

    @app.delete("/entries/{weight_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_entry(
        weight_id: int, request: Request, confirm: bool = False
    ) -> Response:
        """Delete a weight entry; requires confirm=true."""
        state_container: AppContainer = request.app.state.container
        await state_container.tracker_service.delete_entry(
            weight_id, confirmed=confirm
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/goal")
    async def get_goal(request: Request, unit: Unit | None = None) -> dict[str, object]:
        """Return the goal in the selected unit with form defaults."""
        state_container: AppContainer = request.app.state.container
        goal = await state_container.tracker_service.get_goal()
        return _goal_payload(goal, unit or settings.default_unit)

    @app.put("/goal")
    async def set_goal(
        form: GoalForm, request: Request, unit: Unit | None = None
    ) -> dict[str, object]:
        """Validate and replace the goal."""
        state_container: AppContainer = request.app.state.container
        goal = await state_container.tracker_service.set_goal(form.stones, form.pounds)
        return _goal_payload(goal, unit or settings.default_unit)

    @app.delete("/goal")
    async def clear_goal(
        request: Request, unit: Unit | None = None, confirm: bool = False
    ) -> dict[str, object]:
        """Clear the goal; requires confirm=true."""
        state_container: AppContainer = request.app.state.container
        goal = await state_container.tracker_service.clear_goal(confirmed=confirm)
        return _goal_payload(goal, unit or settings.default_unit)

    return app


def _dashboard_payload(
    unit: Unit, date_range: DateRange, summary: Dashboard
) -> dict[str, object]:
    return {
        "unit": unit,
        "range": date_range,
        "window": {
            "start_date": summary.window.start_date,
            "end_date": summary.window.end_date,
        },
        "points": summary.points,
        "rows": summary.rows,
        "goal": {
            "pounds": summary.goal_pounds,
            "value": summary.goal_value,
            "label": summary.goal_label,
            "header_label": goal_header_label(summary.goal_pounds),
        },
        "errors": summary.errors,
    }


def _goal_payload(goal: Goal, unit: Unit) -> dict[str, object]:
    stones, pounds = goal_form_defaults(goal.pounds)
    return {
        "pounds": goal.pounds,
        "updated_at": goal.updated_at,
        "is_set": goal.is_set,
        "value": goal_value(goal.pounds, unit),
        "label": goal_label(goal.pounds, unit),
        "header_label": goal_header_label(goal.pounds),
        "form": {"stones": stones, "pounds": pounds},
    }
