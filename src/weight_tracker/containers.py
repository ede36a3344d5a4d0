"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from weight_tracker.adapters.weight_api_client import (
    HttpxWeightApiClient,
    WeightApiClient,
)
from weight_tracker.config import Settings
from weight_tracker.services.tracker import WeightTrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    weight_api_client: WeightApiClient
    tracker_service: WeightTrackerService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    weight_api_client = HttpxWeightApiClient.create(
        base_url=resolved_settings.weight_api_url,
        timeout_seconds=resolved_settings.weight_api_timeout_seconds,
    )
    tracker_service = WeightTrackerService(
        client=weight_api_client,
        timezone=resolved_settings.timezone,
    )

    async def close_resources() -> None:
        await weight_api_client.close()

    return AppContainer(
        settings=resolved_settings,
        weight_api_client=weight_api_client,
        tracker_service=tracker_service,
        close_resources=close_resources,
    )
