from fastapi.testclient import TestClient

from id_allocator import AllocatorConfig, BoundedUniqueIdAllocator
from id_allocator.api import create_app


def test_next_and_range_are_unique():
	client = TestClient(create_app(AllocatorConfig()))

	assert client.get("/next").json() == 0
	assert client.get("/next").json() == 1
	assert client.get("/range", params={"count": 3}).json() == [2, 3, 4]
	assert client.get("/range", params={"count": 0}).status_code == 422


def test_reclaim_and_reuse():
	client = TestClient(create_app(AllocatorConfig()))
	client.get("/range", params={"count": 3})

	resp = client.post("/reclaim/1")
	assert resp.status_code == 200
	assert resp.json() == {"reclaimed": 1}
	assert client.get("/used/1").json() == {"id": 1, "used": False}
	assert client.get("/next").json() == 1
	assert client.get("/used/1").json() == {"id": 1, "used": True}


def test_invalid_reclaim_is_bad_request():
	client = TestClient(create_app(AllocatorConfig()))

	resp = client.post("/reclaim/5")
	assert resp.status_code == 400
	assert "ID not currently allocated" in resp.json()["detail"]


def test_bounded_exhaustion_and_stats():
	client = TestClient(create_app(allocator=BoundedUniqueIdAllocator(2)))

	assert client.get("/range", params={"count": 2}).json() == [0, 1]
	assert client.get("/next").status_code == 409
	assert client.get("/range", params={"count": 1}).status_code == 409

	stats = client.get("/stats").json()
	assert stats == {
		"used_ids": [0, 1],
		"used_count": 2,
		"capacity": 2,
		"used_percentage": 100.0,
	}


def test_unbounded_stats_have_no_capacity():
	client = TestClient(create_app(AllocatorConfig()))
	client.get("/next")

	assert client.get("/stats").json() == {"used_ids": [0], "used_count": 1}
