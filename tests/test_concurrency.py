"""
Overlapping requests against the shared in-memory SQLite connection.

httpx.ASGITransport runs requests concurrently on one event loop, so
sessions interleave the way they do under uvicorn.
"""

import asyncio

import httpx

from nursery.main import create_app


async def test_overlapping_writes_are_all_kept(test_settings):
    app = create_app(test_settings)

    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://nursery.test") as client:
            creates = [client.post("/api/categories", json={"name": f"Category {n}"}) for n in range(30)]
            # Failed requests roll back their session while the creates are in flight
            misses = [client.put("/api/categories/missing", json={"name": "Ghost"}) for _ in range(30)]
            responses = await asyncio.gather(*creates, *misses)
            listed = (await client.get("/api/categories")).json()

    assert [response.status_code for response in responses[:30]] == [201] * 30
    assert {response.status_code for response in responses[30:]} == {404}
    assert len(listed) == 30
    assert {category["id"] for category in listed} == {response.json()["id"] for response in responses[:30]}


async def test_overlapping_reads_and_deletes(test_settings):
    app = create_app(test_settings)

    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://nursery.test") as client:
            created = await asyncio.gather(
                *[client.post("/api/plants", json={"name": f"Plant {n}"}) for n in range(10)]
            )
            ids = [response.json()["id"] for response in created]

            results = await asyncio.gather(
                *[client.delete(f"/api/plants/{plant_id}") for plant_id in ids[:5]],
                *[client.get(f"/api/plants/{plant_id}") for plant_id in ids[5:]],
                client.get("/api/health/ready"),
            )
            remaining = (await client.get("/api/plants")).json()

    assert all(response.status_code == 200 for response in results)
    assert sorted(plant["id"] for plant in remaining) == sorted(ids[5:])
