"""
Unexpected failures answer 500 with a fixed message and no internal detail.
"""

from fastapi.testclient import TestClient

from nursery.main import create_app
from nursery.services.catalog import ColorService
from nursery.services.plant import PlantService
from nursery.services.variant import VariantService

INTERNAL_DETAIL = "disk I/O error at /var/lib/nursery/db"


async def fail(*args, **kwargs):
    raise RuntimeError(INTERNAL_DETAIL)


def test_plant_create_failure(client, monkeypatch):
    monkeypatch.setattr(PlantService, "create", fail)

    response = client.post("/api/plants", json={"name": "Monstera"})

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to create plant"}
    assert INTERNAL_DETAIL not in response.text


def test_plant_list_failure(client, monkeypatch):
    monkeypatch.setattr(PlantService, "list_all", fail)

    response = client.get("/api/plants")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch plants"}


def test_resource_list_failure(client, monkeypatch):
    monkeypatch.setattr(ColorService, "list_all", fail)

    response = client.get("/api/colors")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch colors"}


def test_resource_update_failure(client, create, plant_with_color, monkeypatch):
    plant, color = plant_with_color
    variant = create("variants", {"plantId": plant["id"], "colorId": color["id"], "sku": "MON-S", "price": 10})
    monkeypatch.setattr(VariantService, "update", fail)

    response = client.put(f"/api/variants/{variant['id']}", json={"price": 12})

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to update variant"}
    monkeypatch.undo()
    assert client.get(f"/api/variants/{variant['id']}").json()["price"] == 10


def test_unhandled_exception_handler(test_settings):
    app = create_app(test_settings)

    @app.get("/api/explode")
    async def explode():
        raise RuntimeError(INTERNAL_DETAIL)

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/explode")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert INTERNAL_DETAIL not in response.text
