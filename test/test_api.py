import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api.deps import task_repository
from backend_fastapi.main import app

from fakes import FailingTaskRepository, InMemoryTaskRepository


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[task_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


def create(client, **body):
    return client.post("/api/tasks", json=body)


def test_welcome(client):
    response = client.get("/api")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to task manager api!"}


def test_create_defaults_status_and_stamps_times(client):
    response = create(client, title="Buy groceries", description="Milk, eggs")

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Task created successfully"
    data = body["data"]
    assert data["id"] is not None
    assert data["status"] == "created"
    assert data["description"] == "Milk, eggs"
    assert data["createdAt"] == data["updatedAt"]


def test_create_rejects_short_title(client, repo):
    response = create(client, title="Short")

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "title" in body["errors"]
    assert repo.list() == ([], 0)


def test_create_rejects_long_title(client, repo):
    response = create(client, title="x" * 256)

    assert response.status_code == 400
    assert repo.list() == ([], 0)


def test_create_requires_title(client):
    response = create(client, description="nothing else")

    assert response.status_code == 400
    assert response.json()["errors"] == {"title": ["Title cannot be blank"]}


def test_create_rejects_unknown_status(client):
    response = create(client, title="Valid title", status="archived")

    assert response.status_code == 400
    assert response.json()["errors"]["status"] == [
        "Status must be one of: created, in_progress, completed"
    ]


def test_create_rejects_wrongly_typed_body(client):
    response = create(client, title=12345678)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "title" in body["errors"]


def test_create_reports_persistence_failure(caplog):
    app.dependency_overrides[task_repository] = FailingTaskRepository
    try:
        response = TestClient(app).post("/api/tasks", json={"title": "Buy groceries"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Failed to create task: database is locked",
    }
    assert "Buy groceries" in caplog.text


def test_show_task(client):
    task_id = create(client, title="Read a book").json()["data"]["id"]

    response = client.get(f"/api/tasks/{task_id}")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["data"]["title"] == "Read a book"


def test_show_missing_task_is_not_found(client):
    response = client.get("/api/tasks/999")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Task with id 999 not found"}


def test_update_only_description_keeps_title_and_status(client):
    created = create(client, title="Write report", status="in_progress").json()["data"]

    response = client.put(
        f"/api/tasks/{created['id']}", json={"description": "Quarterly numbers"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Task updated successfully"
    assert body["data"]["title"] == "Write report"
    assert body["data"]["status"] == "in_progress"
    assert body["data"]["description"] == "Quarterly numbers"
    assert body["data"]["createdAt"] == created["createdAt"]
    assert body["data"]["updatedAt"] >= created["updatedAt"]


def test_update_with_invalid_status_changes_nothing(client):
    created = create(client, title="Write report").json()["data"]

    response = client.put(f"/api/tasks/{created['id']}", json={"status": "paused"})

    assert response.status_code == 400
    assert "status" in response.json()["errors"]
    assert client.get(f"/api/tasks/{created['id']}").json()["data"] == created


def test_update_missing_task_is_not_found(client):
    response = client.put("/api/tasks/321", json={"title": "Does not matter"})

    assert response.status_code == 404


def test_delete_missing_task_is_not_found(client):
    response = client.delete("/api/tasks/321")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_delete_reports_persistence_failure(repo, caplog):
    failing = FailingTaskRepository()
    failing._data = repo._data
    client = TestClient(app)
    app.dependency_overrides[task_repository] = lambda: repo
    try:
        task_id = create(client, title="Cannot delete me").json()["data"]["id"]
        app.dependency_overrides[task_repository] = lambda: failing
        response = client.delete(f"/api/tasks/{task_id}")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to delete task: database is locked"
    assert "Cannot delete me" in caplog.text


def test_full_lifecycle(client):
    created = create(client, title="Buy groceries", description="Milk, eggs")
    assert created.status_code == 201
    task = created.json()["data"]
    assert task["status"] == "created"

    updated = client.put(f"/api/tasks/{task['id']}", json={"status": "in_progress"})
    assert updated.status_code == 200
    assert updated.json()["data"]["status"] == "in_progress"
    assert updated.json()["data"]["title"] == "Buy groceries"

    deleted = client.delete(f"/api/tasks/{task['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True, "message": "Task deleted successfully"}

    assert client.get(f"/api/tasks/{task['id']}").status_code == 404


class TestListTasks:
    @pytest.fixture(autouse=True)
    def seed(self, client):
        for i in range(12):
            status = "completed" if i % 4 == 0 else "created"
            create(client, title=f"Seeded task {i:02d}", status=status)

    def test_envelope_and_defaults(self, client):
        body = client.get("/api/tasks").json()

        assert body["success"] is True
        assert len(body["data"]) == 10
        assert body["pagination"] == {"page": 1, "record_per_page": 10, "total_tasks": 12}

    def test_newest_first(self, client):
        data = client.get("/api/tasks", params={"limit": 100}).json()["data"]

        stamps = [(t["createdAt"], t["id"]) for t in data]
        assert stamps == sorted(stamps, reverse=True)
        assert data[0]["title"] == "Seeded task 11"

    def test_page_zero_behaves_like_page_one(self, client):
        first = client.get("/api/tasks", params={"page": 1}).json()
        zero = client.get("/api/tasks", params={"page": 0}).json()

        assert zero == first

    @pytest.mark.parametrize("limit", [0, 101])
    def test_out_of_range_limit_behaves_like_default(self, client, limit):
        default = client.get("/api/tasks").json()

        assert client.get("/api/tasks", params={"limit": limit}).json() == default

    def test_status_filter_and_total(self, client):
        body = client.get("/api/tasks", params={"status": "completed", "limit": 2}).json()

        assert [t["status"] for t in body["data"]] == ["completed", "completed"]
        assert body["pagination"]["total_tasks"] == 3
        assert body["pagination"]["record_per_page"] == 2

    def test_last_page(self, client):
        body = client.get("/api/tasks", params={"page": 2}).json()

        assert len(body["data"]) == 2
        assert body["pagination"]["page"] == 2

    def test_huge_page_is_an_empty_page(self, client):
        body = client.get("/api/tasks", params={"page": 10**18}).json()

        assert body["data"] == []
        assert body["pagination"] == {
            "page": 10**18,
            "record_per_page": 10,
            "total_tasks": 12,
        }

    def test_non_numeric_page_is_a_client_error(self, client):
        response = client.get("/api/tasks", params={"page": "two"})

        assert response.status_code == 400
        assert "page" in response.json()["errors"]
