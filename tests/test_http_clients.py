"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from weight_tracker.adapters.weight_api_client import HttpxWeightApiClient
from weight_tracker.domain.errors import WeightApiError

BASE_URL = "https://weights.test/api/v1"

_WEIGHT = {
    "id": 7,
    "date": "2024-01-10",
    "pounds": 170,
    "created_at": "2024-01-10 08:00:00",
    "updated_at": "2024-01-10 08:00:00",
}


def _client(handler) -> HttpxWeightApiClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    return HttpxWeightApiClient(base_url=BASE_URL, http_client=async_client)


def test_list_weights_passes_bounds() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"weights": [_WEIGHT]})

    client = _client(handler)

    weights = asyncio.run(client.list_weights("2024-01-01", "2024-01-31"))

    assert weights[0].id == 7
    assert weights[0].pounds == 170.0
    assert seen[0].url.path == "/api/v1/weights"
    assert seen[0].url.params["start_date"] == "2024-01-01"
    assert seen[0].url.params["end_date"] == "2024-01-31"


def test_list_weights_unbounded_omits_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"weights": None})

    client = _client(handler)

    weights = asyncio.run(client.list_weights())

    assert weights == []
    assert "start_date" not in seen[0].url.params
    assert "end_date" not in seen[0].url.params


def test_create_and_update_send_date_and_pounds() -> None:
    payloads: list[tuple[str, str, dict[str, object]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content.decode())
        payloads.append((request.method, request.url.path, payload))
        status = 201 if request.method == "POST" else 200
        return httpx.Response(status, json={**_WEIGHT, **payload})

    client = _client(handler)

    created = asyncio.run(client.create_weight("2024-01-10", 170.0))
    updated = asyncio.run(client.update_weight(7, "2024-01-11", 169.5))

    assert created.date == "2024-01-10"
    assert updated.pounds == 169.5
    assert payloads[0] == (
        "POST",
        "/api/v1/weights",
        {"date": "2024-01-10", "pounds": 170.0},
    )
    assert payloads[1] == (
        "PUT",
        "/api/v1/weights/7",
        {"date": "2024-01-11", "pounds": 169.5},
    )


def test_server_error_message_is_surfaced_verbatim() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            409, json={"error": "Weight entry already exists for this date"}
        )

    client = _client(handler)

    with pytest.raises(WeightApiError) as exc_info:
        asyncio.run(client.create_weight("2024-01-10", 170.0))

    assert exc_info.value.message == "Weight entry already exists for this date"
    assert exc_info.value.status_code == 409


def test_mutation_without_error_body_uses_fallback() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    client = _client(handler)

    with pytest.raises(WeightApiError) as exc_info:
        asyncio.run(client.update_goal(150.0))

    assert exc_info.value.message == "Failed to update goal"


def test_delete_and_fetch_failures_use_fixed_messages() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "Weight entry not found"})

    client = _client(handler)

    with pytest.raises(WeightApiError) as delete_error:
        asyncio.run(client.delete_weight(99))
    with pytest.raises(WeightApiError) as fetch_error:
        asyncio.run(client.get_weight(99))

    assert delete_error.value.message == "Failed to delete weight entry"
    assert fetch_error.value.message == "Failed to fetch weight"
    assert fetch_error.value.status_code == 404


def test_transport_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)

    with pytest.raises(WeightApiError) as exc_info:
        asyncio.run(client.get_goal())

    assert exc_info.value.message == "Failed to fetch goal"
    assert exc_info.value.status_code is None


def test_goal_round_trips_null() -> None:
    sent: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "PUT":
            payload = json.loads(request.content.decode())
            sent.append(payload)
            return httpx.Response(
                200, json={"pounds": payload["pounds"], "updated_at": "2024-01-10"}
            )
        return httpx.Response(200, json={"pounds": None, "updated_at": None})

    client = _client(handler)

    cleared = asyncio.run(client.update_goal(None))
    zero = asyncio.run(client.update_goal(0.0))
    fetched = asyncio.run(client.get_goal())

    assert sent == [{"pounds": None}, {"pounds": 0.0}]
    assert cleared.pounds is None
    assert zero.pounds == 0.0
    assert zero.is_set
    assert not fetched.is_set


def test_create_strips_trailing_slash() -> None:
    client = HttpxWeightApiClient.create(f"{BASE_URL}/", timeout_seconds=5)

    assert client.base_url == BASE_URL
    assert client.timeout_seconds == 5
    asyncio.run(client.close())


def test_non_json_success_body_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy</html>")

    client = _client(handler)

    with pytest.raises(WeightApiError) as list_error:
        asyncio.run(client.list_weights())
    with pytest.raises(WeightApiError) as goal_error:
        asyncio.run(client.get_goal())

    assert list_error.value.message == "Failed to fetch weights"
    assert list_error.value.status_code == 200
    assert goal_error.value.message == "Failed to fetch goal"


def test_incomplete_entry_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(201, json={"id": 1})
        return httpx.Response(200, json={"weights": [{"id": 1, "date": "2024-01-01"}]})

    client = _client(handler)

    with pytest.raises(WeightApiError) as list_error:
        asyncio.run(client.list_weights())
    with pytest.raises(WeightApiError) as create_error:
        asyncio.run(client.create_weight("2024-01-01", 170.0))

    assert list_error.value.message == "Failed to fetch weights"
    assert create_error.value.message == "Failed to create weight entry"
    assert create_error.value.status_code == 201
