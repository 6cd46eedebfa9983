"""Tests for the Goal Service routes."""

import json


def create(client, **overrides):
    body = {
        "title": "Run 5k",
        "category": "Health & Fitness",
        "completed": 0,
        "endDate": "2024-03-01",
        "steps": json.dumps([{"title": "Buy shoes", "done": False}]),
        "userId": 7,
    }
    body.update(overrides)
    res = client.post("/api/goals", json=body)
    assert res.status_code == 200
    return res.json()["goal"]


def test_root(client):
    res = client.get("/")
    assert res.status_code == 200


def test_list_empty(client):
    res = client.get("/api/goals/7")
    assert res.status_code == 200
    assert res.json() == []


def test_create_goal_assigns_id(client):
    goal = create(client)

    assert isinstance(goal["id"], int)
    assert goal["userId"] == 7
    assert goal["endDate"] == "2024-03-01"
    assert goal["category"] == "Health & Fitness"
    assert json.loads(goal["steps"]) == [{"title": "Buy shoes", "done": False}]


def test_create_accepts_step_list(client):
    goal = create(client, steps=[{"title": "Stretch", "done": True}])
    assert json.loads(goal["steps"]) == [{"title": "Stretch", "done": True}]


def test_create_rejects_out_of_range_completion(client):
    res = client.post("/api/goals", json={
        "title": "Too much",
        "completed": 150,
        "endDate": "2024-03-01",
        "userId": 7,
    })
    assert res.status_code == 422


def test_list_only_returns_users_goals(client):
    first = create(client, title="Mine")
    create(client, title="Someone else's", userId=8)

    res = client.get("/api/goals/7")
    assert [goal["id"] for goal in res.json()] == [first["id"]]


def test_update_goal(client):
    goal = create(client)
    goal.update(completed=100, steps=json.dumps([{"title": "Buy shoes", "done": True}]))

    res = client.put("/api/goals", json=goal)

    assert res.status_code == 200
    data = res.json()
    assert data["completed"] == 100
    assert json.loads(data["steps"])[0]["done"] is True
    assert client.get("/api/goals/7").json()[0]["completed"] == 100


def test_update_unknown_goal(client):
    res = client.put("/api/goals", json={
        "id": 999,
        "title": "Ghost",
        "endDate": "2024-03-01",
    })
    assert res.status_code == 404


def test_delete_goal(client):
    goal = create(client)

    res = client.delete(f"/api/goals/{goal['id']}")

    assert res.status_code == 200
    assert "message" in res.json()
    assert client.get("/api/goals/7").json() == []


def test_delete_unknown_goal(client):
    res = client.delete("/api/goals/999")
    assert res.status_code == 404
