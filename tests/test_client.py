"""
NurseryClient tests: retry, error mapping and the query cache.

Transport-level behavior uses httpx.MockTransport; the end-to-end test
drives the real application through FastAPI's TestClient.
"""

import httpx
import pytest

from nursery.api.schemas.plant import PlantCreate, PlantUpdate
from nursery.client import NETWORK_ERROR_MESSAGE, ApiError, NurseryClient


def make_client(handler):
    calls = []

    def recording_handler(request):
        calls.append((request.method, request.url.path, dict(request.url.params)))
        return handler(request, len(calls))

    http = httpx.Client(transport=httpx.MockTransport(recording_handler), base_url="http://nursery.test")
    return NurseryClient(http_client=http, retry_delay=0), calls


def test_retries_once_after_server_error():
    def handler(request, attempt):
        if attempt == 1:
            return httpx.Response(503, json={"message": "Service unavailable"})
        return httpx.Response(200, json=[{"id": "p1", "name": "Monstera"}])

    client, calls = make_client(handler)

    assert client.list("plants") == [{"id": "p1", "name": "Monstera"}]
    assert len(calls) == 2


def test_second_server_error_raises():
    client, calls = make_client(lambda request, attempt: httpx.Response(500, json={"message": "Failed to fetch plants"}))

    with pytest.raises(ApiError) as excinfo:
        client.list("plants")

    assert excinfo.value.status == 500
    assert excinfo.value.message == "Failed to fetch plants"
    assert len(calls) == 2


def test_client_errors_are_not_retried():
    client, calls = make_client(lambda request, attempt: httpx.Response(404, json={"message": "Plant not found"}))

    with pytest.raises(ApiError) as excinfo:
        client.get("plants", "missing")

    assert excinfo.value.status == 404
    assert str(excinfo.value) == "Plant not found"
    assert excinfo.value.data == {"message": "Plant not found"}
    assert len(calls) == 1


def test_error_without_message_uses_generic_text():
    client, _ = make_client(lambda request, attempt: httpx.Response(502, text="Bad gateway"))

    with pytest.raises(ApiError) as excinfo:
        client.list("colors")

    assert excinfo.value.message == "Server error occurred"
    assert excinfo.value.data is None


def test_network_error():
    def handler(request, attempt):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = make_client(handler)

    with pytest.raises(ApiError) as excinfo:
        client.list("plants")

    assert excinfo.value.message == NETWORK_ERROR_MESSAGE
    assert excinfo.value.status is None


def test_queries_are_cached_until_a_mutation():
    def handler(request, attempt):
        if request.method == "POST":
            return httpx.Response(201, json={"id": "v2"})
        return httpx.Response(200, json=[{"id": f"v{attempt}"}])

    client, calls = make_client(handler)

    first = client.list("variants", plantId="p1")
    assert client.list("variants", plantId="p1") == first
    assert calls == [("GET", "/api/variants", {"plantId": "p1"})]

    client.list("variants", plantId="p2")
    client.list("colors")
    assert len(calls) == 3

    client.create("variants", {"plantId": "p1", "colorId": "c1", "sku": "MON-S", "price": 10})
    client.list("variants", plantId="p1")
    client.list("colors")

    # Only the variant query is fetched again
    assert [call[1] for call in calls[4:]] == ["/api/variants"]


def test_none_filters_are_dropped():
    client, calls = make_client(lambda request, attempt: httpx.Response(200, json=[]))

    client.list("variants", plantId=None)

    assert calls == [("GET", "/api/variants", {})]


def test_unknown_resource():
    client, _ = make_client(lambda request, attempt: httpx.Response(200, json=[]))

    with pytest.raises(ValueError):
        client.list("orders")


def test_end_to_end_against_app(client):
    api = NurseryClient(http_client=client, retry_delay=0)

    category = api.create("categories", {"name": "Indoor Plants"})
    plant = api.create("plants", PlantCreate(name="Monstera Deliciosa", category_id=category["id"]))
    assert plant["categoryId"] == category["id"]
    assert [item["id"] for item in api.list("plants", categoryId=category["id"])] == [plant["id"]]

    updated = api.update("plants", plant["id"], PlantUpdate(is_featured=True))
    assert updated["isFeatured"] is True
    assert updated["name"] == "Monstera Deliciosa"
    assert api.get("plants", plant["id"])["isFeatured"] is True

    assert api.delete("plants", plant["id"]) == {"message": "Plant deleted successfully"}
    assert api.list("plants") == []

    with pytest.raises(ApiError) as excinfo:
        api.get("plants", plant["id"])
    assert excinfo.value.status == 404
    assert excinfo.value.message == "Plant not found"
