"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from weight_tracker.adapters.weight_api_client import WeightApiClient
from weight_tracker.config import Settings
from weight_tracker.containers import AppContainer
from weight_tracker.domain.errors import WeightApiError
from weight_tracker.domain.weights import Goal, WeightEntry
from weight_tracker.services.tracker import WeightTrackerService

TIMESTAMP = "2024-01-10 08:00:00"


@dataclass
class InMemoryWeightApiClient(WeightApiClient):
    """In-memory weight API for tests."""

    weights: dict[int, WeightEntry] = field(default_factory=dict)
    goal: Goal = field(default_factory=lambda: Goal(pounds=None))
    calls: list[str] = field(default_factory=list)
    fail_list: bool = False
    fail_goal: bool = False
    next_id: int = 1

    def add(self, date: str, pounds: float) -> WeightEntry:
        entry = WeightEntry(
            id=self.next_id,
            date=date,
            pounds=pounds,
            created_at=TIMESTAMP,
            updated_at=TIMESTAMP,
        )
        self.weights[entry.id] = entry
        self.next_id += 1
        return entry

    async def list_weights(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> list[WeightEntry]:
        self.calls.append("list_weights")
        if self.fail_list:
            raise WeightApiError("Failed to fetch weights", status_code=500)
        results = [
            entry
            for entry in self.weights.values()
            if (start_date is None or entry.date >= start_date)
            and (end_date is None or entry.date <= end_date)
        ]
        return sorted(results, key=lambda entry: entry.date, reverse=True)

    async def get_weight(self, weight_id: int) -> WeightEntry:
        self.calls.append("get_weight")
        if weight_id not in self.weights:
            raise WeightApiError("Failed to fetch weight", status_code=404)
        return self.weights[weight_id]

    async def create_weight(self, date: str, pounds: float) -> WeightEntry:
        self.calls.append("create_weight")
        return self.add(date, pounds)

    async def update_weight(
        self, weight_id: int, date: str, pounds: float
    ) -> WeightEntry:
        self.calls.append("update_weight")
        if weight_id not in self.weights:
            raise WeightApiError("Weight entry not found", status_code=404)
        current = self.weights[weight_id]
        updated = WeightEntry(
            id=current.id,
            date=date,
            pounds=pounds,
            created_at=current.created_at,
            updated_at=TIMESTAMP,
        )
        self.weights[weight_id] = updated
        return updated

    async def delete_weight(self, weight_id: int) -> None:
        self.calls.append("delete_weight")
        if weight_id not in self.weights:
            raise WeightApiError("Failed to delete weight entry", status_code=404)
        del self.weights[weight_id]

    async def get_goal(self) -> Goal:
        self.calls.append("get_goal")
        if self.fail_goal:
            raise WeightApiError("Failed to fetch goal", status_code=500)
        return self.goal

    async def update_goal(self, pounds: float | None) -> Goal:
        self.calls.append("update_goal")
        self.goal = Goal(pounds=pounds, updated_at=TIMESTAMP)
        return self.goal


@pytest.fixture
def settings() -> Settings:
    return Settings(weight_api_url="https://weights.test/api/v1")


@pytest.fixture
def weight_api() -> InMemoryWeightApiClient:
    return InMemoryWeightApiClient()


@pytest.fixture
def container(settings: Settings, weight_api: InMemoryWeightApiClient) -> AppContainer:
    tracker_service = WeightTrackerService(
        client=weight_api, timezone=settings.timezone
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        weight_api_client=weight_api,
        tracker_service=tracker_service,
        close_resources=close_resources,
    )
