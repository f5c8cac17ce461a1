"""
Endpoint tests for the catalog, variant and care resources.
"""

import pytest
from fastapi.testclient import TestClient

from nursery.core.config import Settings
from nursery.main import create_app


@pytest.mark.parametrize(
    "resource, payload, change",
    [
        ("categories", {"name": "Indoor Plants"}, {"description": "Shade lovers"}),
        ("colors", {"name": "Classic Green", "hexCode": "#4CAF50"}, {"isActive": False}),
        ("tag-groups", {"name": "Indoor Collection"}, {"description": "Indoor tags"}),
        ("tags", {"name": "Pet Friendly"}, {"name": "Pet Safe"}),
        ("fertilizers", {"name": "Organic Compost", "type": "Organic"}, {"npkRatio": "5-5-5"}),
    ],
)
def test_catalog_crud(client, create, resource, payload, change):
    record = create(resource, payload)

    assert client.get(f"/api/{resource}/{record['id']}").json() == record
    assert [item["id"] for item in client.get(f"/api/{resource}").json()] == [record["id"]]

    updated = client.put(f"/api/{resource}/{record['id']}", json=change)
    assert updated.status_code == 200
    for key, value in change.items():
        assert updated.json()[key] == value

    deleted = client.delete(f"/api/{resource}/{record['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["message"].endswith("deleted successfully")
    assert client.get(f"/api/{resource}/{record['id']}").status_code == 404


def test_unknown_record_message(client):
    response = client.get("/api/size-profiles/nope")

    assert response.status_code == 404
    assert response.json() == {"message": "Size profile not found"}


def test_color_requires_hex_code(client):
    assert client.post("/api/colors", json={"name": "Green", "hexCode": "green"}).status_code == 400
    assert client.get("/api/colors").json() == []


def test_tags_filtered_by_group(client, create):
    group = create("tag-groups", {"name": "Indoor Collection"})
    create("tags", {"name": "Air Purifying", "tagGroupId": group["id"]})
    create("tags", {"name": "Seasonal"})

    grouped = client.get("/api/tags", params={"tagGroupId": group["id"]}).json()

    assert [tag["name"] for tag in grouped] == ["Air Purifying"]
    assert len(client.get("/api/tags").json()) == 2


def test_variants_filtered_by_plant(client, create, plant_with_color):
    plant, color = plant_with_color
    other = create("plants", {"name": "Pothos"})
    create("variants", {"plantId": plant["id"], "colorId": color["id"], "sku": "MON-S", "price": 12.5})
    create("variants", {"plantId": plant["id"], "colorId": color["id"], "sku": "MON-L", "price": 30})
    create("variants", {"plantId": other["id"], "colorId": color["id"], "sku": "POT-S", "price": 8})

    filtered = client.get("/api/variants", params={"plantId": plant["id"]}).json()
    everything = client.get("/api/variants").json()

    assert {variant["sku"] for variant in filtered} == {"MON-S", "MON-L"}
    assert all(variant["plantId"] == plant["id"] for variant in filtered)
    assert len(everything) == 3


def test_variant_fields_are_camel_case(create, plant_with_color):
    plant, color = plant_with_color

    variant = create(
        "variants",
        {
            "plantId": plant["id"],
            "colorId": color["id"],
            "sku": "MON-M",
            "price": 19.99,
            "costPrice": 8.5,
            "additionalImages": ["https://example.com/a.jpg"],
        },
    )

    assert variant["price"] == 19.99
    assert variant["costPrice"] == 8.5
    assert variant["additionalImages"] == ["https://example.com/a.jpg"]
    assert variant["isActive"] is True
    assert variant["sizeId"] is None
    assert "createdAt" in variant


def test_duplicate_sku_conflicts(client, create, plant_with_color):
    plant, color = plant_with_color
    first = create("variants", {"plantId": plant["id"], "colorId": color["id"], "sku": "MON-S", "price": 10})
    second = create("variants", {"plantId": plant["id"], "colorId": color["id"], "sku": "MON-M", "price": 15})

    created = client.post(
        "/api/variants", json={"plantId": plant["id"], "colorId": color["id"], "sku": "MON-S", "price": 11}
    )
    updated = client.put(f"/api/variants/{second['id']}", json={"sku": "MON-S"})

    assert created.status_code == 409
    assert created.json() == {"message": "SKU 'MON-S' is already in use"}
    assert updated.status_code == 409
    assert client.put(f"/api/variants/{first['id']}", json={"sku": "MON-S"}).status_code == 200
    assert len(client.get("/api/variants").json()) == 2


def test_variant_price_must_be_positive(client, plant_with_color):
    plant, color = plant_with_color

    response = client.post(
        "/api/variants", json={"plantId": plant["id"], "colorId": color["id"], "sku": "MON-S", "price": 0}
    )

    assert response.status_code == 400


def test_variant_requires_existing_color(client, plant_with_color):
    plant, _ = plant_with_color

    response = client.post(
        "/api/variants", json={"plantId": plant["id"], "colorId": "missing", "sku": "MON-S", "price": 10}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid variant data"


def test_deleting_plant_keeps_its_variants(client, create, plant_with_color):
    plant, color = plant_with_color
    variant = create("variants", {"plantId": plant["id"], "colorId": color["id"], "sku": "MON-S", "price": 10})

    assert client.delete(f"/api/plants/{plant['id']}").status_code == 200

    remaining = client.get("/api/variants", params={"plantId": plant["id"]}).json()
    assert [item["id"] for item in remaining] == [variant["id"]]


def test_size_profile_size_is_case_insensitive(client, create):
    plant = create("plants", {"name": "Monstera"})

    profile = create("size-profiles", {"plantId": plant["id"], "size": "large", "height": 120, "weight": 4.5})
    invalid = client.post("/api/size-profiles", json={"plantId": plant["id"], "size": "Huge"})

    assert profile["size"] == "Large"
    assert profile["weight"] == 4.5
    assert invalid.status_code == 400


def test_care_guidelines_by_plant(client, create):
    monstera = create("plants", {"name": "Monstera"})
    pothos = create("plants", {"name": "Pothos"})
    summer = create(
        "care-guidelines",
        {"plantId": monstera["id"], "season": "summer", "wateringFrequency": "Twice a week", "waterAmount": 300},
    )
    create("care-guidelines", {"plantId": pothos["id"], "season": "Winter"})

    guidelines = client.get("/api/care-guidelines", params={"plantId": monstera["id"]}).json()

    assert summer["season"] == "Summer"
    assert [guideline["id"] for guideline in guidelines] == [summer["id"]]

    updated = client.put(f"/api/care-guidelines/{summer['id']}", json={"season": "Monsoon"})
    assert updated.json()["season"] == "Monsoon"
    assert updated.json()["waterAmount"] == 300


def test_fertilizer_schedule_requires_fertilizer(client, create):
    plant = create("plants", {"name": "Monstera"})
    fertilizer = create("fertilizers", {"name": "NPK 10-10-10", "type": "NPK", "npkRatio": "10-10-10"})

    schedule = create(
        "fertilizer-schedules",
        {"plantId": plant["id"], "fertilizerId": fertilizer["id"], "applicationFrequency": "Monthly"},
    )
    rejected = client.post("/api/fertilizer-schedules", json={"plantId": plant["id"], "fertilizerId": "missing"})

    assert schedule["fertilizerId"] == fertilizer["id"]
    assert rejected.status_code == 400
    assert len(client.get("/api/fertilizer-schedules", params={"plantId": plant["id"]}).json()) == 1


def test_variant_tags_by_variant(client, create, plant_with_color):
    plant, color = plant_with_color
    variant = create("variants", {"plantId": plant["id"], "colorId": color["id"], "sku": "MON-S", "price": 10})
    tag = create("tags", {"name": "Pet Friendly"})

    link = create("variant-tags", {"variantId": variant["id"], "tagId": tag["id"]})

    links = client.get("/api/variant-tags", params={"variantId": variant["id"]}).json()
    assert [item["id"] for item in links] == [link["id"]]
    assert client.post("/api/variant-tags", json={"variantId": variant["id"], "tagId": "missing"}).status_code == 400


def test_health_endpoints(client):
    assert client.get("/api/health").json() == {"status": "healthy", "version": "1.0.0", "database": None}
    ready = client.get("/api/health/ready")
    assert ready.status_code == 200
    assert ready.json()["status"] == "ready"
    assert ready.json()["database"] == "sqlite"


def test_seed_data_on_startup():
    app = create_app(Settings(DATABASE_URL="sqlite+aiosqlite://", SEED_DATA=True, LOG_LEVEL="WARNING"))

    with TestClient(app) as client:
        categories = client.get("/api/categories").json()
        plants = client.get("/api/plants").json()
        colors = client.get("/api/colors").json()

    assert {category["name"] for category in categories} == {"Indoor Plants", "Outdoor Plants"}
    assert {plant["name"] for plant in plants} == {"Monstera Deliciosa", "Snake Plant"}
    assert len(colors) == 4
    featured = [plant["name"] for plant in plants if plant["isFeatured"]]
    assert featured == ["Monstera Deliciosa"]


def test_variant_prices_have_two_decimal_places(client, create, plant_with_color):
    plant, color = plant_with_color
    base = {"plantId": plant["id"], "colorId": color["id"]}

    too_fine = client.post("/api/variants", json={**base, "sku": "MON-S", "price": 12.999})
    cost_too_fine = client.post("/api/variants", json={**base, "sku": "MON-S", "price": 12, "costPrice": 4.125})
    variant = create("variants", {**base, "sku": "MON-S", "price": 12.99, "costPrice": 4.5})
    update_too_fine = client.put(f"/api/variants/{variant['id']}", json={"price": 9.999})

    assert too_fine.status_code == 400
    assert cost_too_fine.status_code == 400
    assert update_too_fine.status_code == 400
    assert variant["price"] == 12.99
    assert client.get(f"/api/variants/{variant['id']}").json()["price"] == 12.99
    assert len(client.get("/api/variants").json()) == 1
