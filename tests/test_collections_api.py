from conftest import register


def test_task_crud(client) -> None:
    register(client)
    created = client.post("/v1/tasks", json={"title": "Write report", "priority": "high", "due_date": "2024-05-01"})
    assert created.status_code == 200
    task = created.json()
    assert task["status"] == "todo"
    assert task["due_date"] == "2024-05-01"

    patched = client.patch(f"/v1/tasks/{task['id']}", json={"status": "done"})
    assert patched.status_code == 200
    assert patched.json()["status"] == "done"
    assert patched.json()["title"] == "Write report"

    listing = client.get("/v1/tasks").json()
    assert listing["total"] == 1

    assert client.delete(f"/v1/tasks/{task['id']}").status_code == 200
    assert client.get("/v1/tasks").json()["items"] == []
    assert client.delete(f"/v1/tasks/{task['id']}").status_code == 404


def test_task_validation(client) -> None:
    register(client)
    assert client.post("/v1/tasks", json={"title": ""}).status_code == 422
    assert client.post("/v1/tasks", json={"title": "x", "priority": "urgent"}).status_code == 422


def test_collections_are_owner_scoped(client) -> None:
    register(client)
    task_id = client.post("/v1/tasks", json={"title": "Private"}).json()["id"]
    project_id = client.post("/v1/projects", json={"name": "Secret"}).json()["id"]

    client.cookies.clear()
    register(client, email="bob@example.com", name="Bob Builder")

    assert client.get("/v1/tasks").json()["items"] == []
    assert client.get("/v1/projects").json()["items"] == []
    assert client.patch(f"/v1/tasks/{task_id}", json={"title": "Mine now"}).status_code == 404
    assert client.delete(f"/v1/projects/{project_id}").status_code == 404


def test_project_progress_bounds(client) -> None:
    register(client)
    assert client.post("/v1/projects", json={"name": "Site", "progress": 101}).status_code == 422

    project = client.post("/v1/projects", json={"name": "Site", "status": "active", "progress": 40}).json()
    patched = client.patch(f"/v1/projects/{project['id']}", json={"progress": 100, "status": "completed"})
    assert patched.json()["progress"] == 100
    assert patched.json()["status"] == "completed"


def test_job_advance_through_pipeline(client) -> None:
    register(client)
    job = client.post("/v1/jobs", json={"company": "Acme", "role": "Engineer"}).json()
    assert job["status"] == "applied"
    assert job["next_status"] == "interview"
    assert job["date_applied"]

    moved = client.post(f"/v1/jobs/{job['id']}/advance").json()
    assert moved["status"] == "interview"
    moved = client.post(f"/v1/jobs/{job['id']}/advance").json()
    assert moved["status"] == "offer"
    assert moved["next_status"] is None

    stuck = client.post(f"/v1/jobs/{job['id']}/advance")
    assert stuck.status_code == 409


def test_rejected_job_cannot_advance(client) -> None:
    register(client)
    job = client.post("/v1/jobs", json={"company": "Acme", "role": "Engineer", "status": "rejected"}).json()
    assert job["next_status"] is None
    assert client.post(f"/v1/jobs/{job['id']}/advance").status_code == 409
    assert client.post("/v1/jobs/missing/advance").status_code == 404


def test_overview_aggregates(client, monkeypatch) -> None:
    from datetime import date

    monkeypatch.setattr("prodash.dates.today", lambda tz_name=None: date(2024, 3, 15))
    register(client)
    client.post("/v1/tasks", json={"title": "One", "status": "done"})
    client.post("/v1/tasks", json={"title": "Two"})
    client.post("/v1/jobs", json={"company": "Acme", "role": "Dev", "status": "interview"})
    habit = client.post("/v1/habits", json={"name": "Read"}).json()
    client.post(f"/v1/habits/{habit['id']}/toggle")
    client.post("/v1/budget", json={"amount": "500", "category": "Pay", "type": "income", "date": "2024-03-01"})
    client.post("/v1/budget", json={"amount": "80", "category": "Food", "type": "expense", "date": "2024-02-01"})

    payload = client.get("/v1/overview").json()
    assert payload["today"] == "2024-03-15"
    assert payload["user_name"] == "Ada"
    stats = payload["stats"]
    assert stats["total_tasks"] == 2
    assert stats["completed_tasks"] == 1
    assert stats["interviews"] == 1
    assert stats["habits_done_today"] == 1
    assert stats["longest_streak"] == 1
    assert stats["balance"] == 420
    assert stats["monthly_balance"] == 500
    assert len(payload["recent_tasks"]) == 2


def test_job_date_applied_defaults_to_configured_today(client, monkeypatch) -> None:
    from datetime import date

    monkeypatch.setattr("prodash.dates.today", lambda tz_name=None: date(2024, 2, 29))
    register(client)
    job = client.post("/v1/jobs", json={"company": "Acme", "role": "Engineer"}).json()
    assert job["date_applied"] == "2024-02-29"

    explicit = client.post("/v1/jobs", json={"company": "Beta", "role": "Analyst", "date_applied": "2024-01-10"}).json()
    assert explicit["date_applied"] == "2024-01-10"
