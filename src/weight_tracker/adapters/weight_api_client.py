"""Weight tracker REST API client."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

import httpx

from weight_tracker.domain.errors import WeightApiError
from weight_tracker.domain.weights import Goal, WeightEntry

T = TypeVar("T")


class WeightApiClient(Protocol):
    """Interface for the weight persistence server."""

    async def list_weights(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> list[WeightEntry]:
        """Return entries, optionally bounded by inclusive ISO dates."""

    async def get_weight(self, weight_id: int) -> WeightEntry:
        """Return a single entry."""

    async def create_weight(self, date: str, pounds: float) -> WeightEntry:
        """Create an entry and return it with its server-assigned id."""

    async def update_weight(
        self, weight_id: int, date: str, pounds: float
    ) -> WeightEntry:
        """Replace the date and pounds of an entry."""

    async def delete_weight(self, weight_id: int) -> None:
        """Delete an entry."""

    async def get_goal(self) -> Goal:
        """Return the goal singleton."""

    async def update_goal(self, pounds: float | None) -> Goal:
        """Set the goal, or clear it when pounds is None."""


@dataclass
class HttpxWeightApiClient(WeightApiClient):
    """HTTPX-backed weight API client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 10.0
    ) -> "HttpxWeightApiClient":
        """Create a weight API client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def list_weights(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> list[WeightEntry]:
        """Fetch entries within the optional date bounds."""
        params: dict[str, str] = {}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        fallback = "Failed to fetch weights"
        response = await self._request(
            "GET", "/weights", fallback=fallback, params=params
        )
        return _decode(response, _parse_weights, fallback)

    async def get_weight(self, weight_id: int) -> WeightEntry:
        """Fetch a single entry by id."""
        fallback = "Failed to fetch weight"
        response = await self._request(
            "GET", f"/weights/{weight_id}", fallback=fallback
        )
        return _decode(response, _parse_weight, fallback)

    async def create_weight(self, date: str, pounds: float) -> WeightEntry:
        """Create an entry."""
        fallback = "Failed to create weight entry"
        response = await self._request(
            "POST",
            "/weights",
            fallback=fallback,
            use_server_message=True,
            json={"date": date, "pounds": pounds},
        )
        return _decode(response, _parse_weight, fallback)

    async def update_weight(
        self, weight_id: int, date: str, pounds: float
    ) -> WeightEntry:
        """Update an entry."""
        fallback = "Failed to update weight entry"
        response = await self._request(
            "PUT",
            f"/weights/{weight_id}",
            fallback=fallback,
            use_server_message=True,
            json={"date": date, "pounds": pounds},
        )
        return _decode(response, _parse_weight, fallback)

    async def delete_weight(self, weight_id: int) -> None:
        """Delete an entry."""
        await self._request(
            "DELETE", f"/weights/{weight_id}", fallback="Failed to delete weight entry"
        )

    async def get_goal(self) -> Goal:
        """Fetch the goal singleton."""
        fallback = "Failed to fetch goal"
        response = await self._request("GET", "/goal", fallback=fallback)
        return _decode(response, _parse_goal, fallback)

    async def update_goal(self, pounds: float | None) -> Goal:
        """Set or clear the goal."""
        fallback = "Failed to update goal"
        response = await self._request(
            "PUT",
            "/goal",
            fallback=fallback,
            use_server_message=True,
            json={"pounds": pounds},
        )
        return _decode(response, _parse_goal, fallback)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        fallback: str,
        use_server_message: bool = False,
        **kwargs: object,
    ) -> httpx.Response:
        """Send a request and raise WeightApiError for failures."""
        try:
            response = await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                timeout=self.timeout_seconds,
                **kwargs,
            )
        except httpx.HTTPError as exc:
            raise WeightApiError(fallback) from exc
        if response.is_success:
            return response
        message = fallback
        if use_server_message:
            message = _error_message(response) or fallback
        raise WeightApiError(message, status_code=response.status_code)


def _error_message(response: httpx.Response) -> str | None:
    """Extract the server's error text from a failed response."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, str) and error:
            return error
    return None


def _decode(
    response: httpx.Response, parse: Callable[[Any], T], fallback: str
) -> T:
    """Parse a successful response body, raising WeightApiError if malformed."""
    try:
        return parse(response.json())
    except (ValueError, KeyError, TypeError, AttributeError) as exc:
        raise WeightApiError(fallback, status_code=response.status_code) from exc


def _parse_weights(payload: dict[str, Any]) -> list[WeightEntry]:
    return [_parse_weight(item) for item in payload.get("weights") or []]


def _parse_weight(payload: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=int(payload["id"]),
        date=str(payload["date"]),
        pounds=float(payload["pounds"]),
        created_at=str(payload.get("created_at") or ""),
        updated_at=str(payload.get("updated_at") or ""),
    )


def _parse_goal(payload: dict[str, object]) -> Goal:
    pounds = payload.get("pounds")
    return Goal(
        pounds=None if pounds is None else float(pounds),
        updated_at=payload.get("updated_at"),
    )
