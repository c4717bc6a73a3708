"""Goal routes — end-to-end through FastAPI against both storage backends.

Invariants:
    - POST → 201 with completed defaulting to false
    - Invalid title/priority/weekStart → 400 with field details, nothing stored
    - PATCH applies only provided fields; unknown id → 404
    - DELETE → 204 empty; second DELETE → 404
"""

from datetime import date

import pytest


GOAL = {"title": "Ship v1", "priority": 1, "weekStart": "2024-06-03"}


async def test_goal_lifecycle(client):
    res = await client.post("/api/goals", json=GOAL)
    assert res.status_code == 201
    goal = res.json()
    assert goal["completed"] is False
    assert goal["weekStart"] == "2024-06-03"
    assert goal["id"]

    res = await client.get("/api/goals/2024-06-03")
    assert res.status_code == 200
    assert res.json() == [goal]

    res = await client.patch(f"/api/goals/{goal['id']}", json={"completed": True})
    assert res.status_code == 200
    assert res.json() == {**goal, "completed": True}

    res = await client.delete(f"/api/goals/{goal['id']}")
    assert res.status_code == 204
    assert res.content == b""

    res = await client.delete(f"/api/goals/{goal['id']}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_list_goals_filters_by_week(client):
    await client.post("/api/goals", json=GOAL)
    await client.post("/api/goals", json={**GOAL, "weekStart": "2024-06-10"})

    res = await client.get("/api/goals/2024-06-10")

    assert [g["weekStart"] for g in res.json()] == ["2024-06-10"]


async def test_list_goals_empty_week(client):
    res = await client.get("/api/goals/2024-06-03")
    assert res.status_code == 200
    assert res.json() == []


async def test_create_goal_accepts_snake_case_week_start(client):
    body = {"title": "Read", "priority": 2, "week_start": "2024-06-03"}
    res = await client.post("/api/goals", json=body)
    assert res.status_code == 201
    assert res.json()["weekStart"] == "2024-06-03"


async def test_create_goal_strips_title(client):
    res = await client.post("/api/goals", json={**GOAL, "title": "  Ship v1  "})
    assert res.json()["title"] == "Ship v1"


@pytest.mark.parametrize("override", [
    {"title": ""},
    {"title": "   "},
    {"title": "x" * 201},
    {"priority": 0},
    {"priority": 4},
    {"weekStart": "June 3rd"},
    {"weekStart": "2024-13-01"},
    {"priority": "2"},
    {"priority": 2.0},
    {"priority": True},
    {"completed": "yes"},
    {"completed": 1},
])
async def test_create_goal_rejects_invalid_fields(client, storage, override):
    res = await client.post("/api/goals", json={**GOAL, **override})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]
    assert await storage.list_goals(date(2024, 6, 3)) == []


async def test_create_goal_missing_fields_lists_each_violation(client):
    res = await client.post("/api/goals", json={})

    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert fields == {"body.title", "body.priority", "body.weekStart"}


async def test_title_at_max_length_accepted(client):
    res = await client.post("/api/goals", json={**GOAL, "title": "x" * 200})
    assert res.status_code == 201


async def test_patch_title_and_priority_only(client):
    goal = (await client.post("/api/goals", json={**GOAL, "completed": True})).json()

    res = await client.patch(
        f"/api/goals/{goal['id']}", json={"title": "Ship v2", "priority": 3},
    )

    assert res.status_code == 200
    assert res.json() == {**goal, "title": "Ship v2", "priority": 3}


async def test_patch_completed_false_applies(client):
    goal = (await client.post("/api/goals", json={**GOAL, "completed": True})).json()
    res = await client.patch(f"/api/goals/{goal['id']}", json={"completed": False})
    assert res.json()["completed"] is False


async def test_patch_empty_body_is_noop(client):
    goal = (await client.post("/api/goals", json=GOAL)).json()
    res = await client.patch(f"/api/goals/{goal['id']}", json={})
    assert res.status_code == 200
    assert res.json() == goal


async def test_patch_rejects_out_of_range_priority(client):
    goal = (await client.post("/api/goals", json=GOAL)).json()
    res = await client.patch(f"/api/goals/{goal['id']}", json={"priority": 5})
    assert res.status_code == 400


async def test_patch_rejects_null_fields(client):
    goal = (await client.post("/api/goals", json=GOAL)).json()
    res = await client.patch(f"/api/goals/{goal['id']}", json={"title": None})
    assert res.status_code == 400


async def test_patch_unknown_goal_returns_404(client):
    res = await client.patch("/api/goals/does-not-exist", json={"completed": True})
    assert res.status_code == 404
    assert res.json()["error"]["context"]["resource_id"] == "does-not-exist"


async def test_list_goals_rejects_malformed_week(client):
    res = await client.get("/api/goals/not-a-date")
    assert res.status_code == 400


async def test_title_bounds_checked_after_stripping(client):
    res = await client.post("/api/goals", json={**GOAL, "title": "x" * 200 + " "})
    assert res.status_code == 201
    assert res.json()["title"] == "x" * 200


@pytest.mark.parametrize("body", [
    {"completed": "yes"},
    {"priority": "3"},
    {"title": "   "},
])
async def test_patch_rejects_wrong_types_and_blank_title(client, body):
    goal = (await client.post("/api/goals", json=GOAL)).json()

    res = await client.patch(f"/api/goals/{goal['id']}", json=body)

    assert res.status_code == 400
    assert (await client.get("/api/goals/2024-06-03")).json() == [goal]


@pytest.mark.parametrize("path", ["/api/goals/2024-06-03T00:00:00", "/api/goals/20240603"])
async def test_list_goals_rejects_datetime_and_compact_dates(client, path):
    res = await client.get(path)
    assert res.status_code == 400
