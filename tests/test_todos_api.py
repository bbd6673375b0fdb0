from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from todo_api.main import create_app
from todo_api.models import parse_due_date
from todo_api.repositories import InMemoryTodoRepository
from todo_api.settings import Settings

NOW = datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

SETTINGS = Settings(host="127.0.0.1", port=8080, log_level="INFO", cors_allow_origins=["*"])


def fixed_clock() -> datetime:
    return NOW


def make_client(repository=None) -> TestClient:
    return TestClient(create_app(settings=SETTINGS, repository=repository, clock=fixed_clock))


def rfc3339(dt: datetime) -> str:
    return dt.isoformat().replace("+00:00", "Z")


def create_todo_payload(title="Test Task", due_date=None):
    if due_date is None:
        due_date = rfc3339(NOW + timedelta(hours=24))
    return {"title": title, "due_date": due_date}


def assert_todo_shape(todo: dict):
    for key in ["id", "title", "due_date"]:
        assert key in todo
    assert isinstance(todo["id"], int)
    assert isinstance(todo["title"], str)
    parse_due_date(todo["due_date"])


class TestHealth:
    def test_health_check(self):
        with make_client() as client:
            res = client.get("/")
        assert res.status_code == 200
        assert res.json()["message"] == "Healthy"


class TestCreateAndGet:
    def test_create_assigns_sequential_ids(self):
        with make_client() as client:
            first = client.post("/todo", json=create_todo_payload(title="Buy milk"))
            second = client.post("/todo", json=create_todo_payload(title="Walk dog"))
        assert first.status_code == 201
        assert second.status_code == 201
        assert_todo_shape(first.json())
        assert first.json()["id"] == 1
        assert first.json()["title"] == "Buy milk"
        assert second.json()["id"] == 2

    def test_due_date_is_echoed(self):
        due = "2030-02-01T09:00:00+09:00"
        with make_client() as client:
            res = client.post("/todo", json=create_todo_payload(due_date=due))
        assert res.status_code == 201
        assert parse_due_date(res.json()["due_date"]) == parse_due_date(due)

    def test_buy_milk_scenario(self):
        with make_client() as client:
            res_create = client.post("/todo", json=create_todo_payload(title="Buy milk"))
            assert res_create.status_code == 201
            created = res_create.json()
            assert created["id"] == 1

            res_get = client.get("/todo/1")
            assert res_get.status_code == 200
            assert res_get.json() == created

            res_404 = client.get("/todo/2")
            assert res_404.status_code == 404
            assert res_404.json() == {"error": "NotFound", "message": "Todo with ID 2 not found"}

    def test_injected_repository_is_used(self):
        repo = InMemoryTodoRepository()
        with make_client(repository=repo) as client:
            res = client.post("/todo", json=create_todo_payload(title="Shared"))
        assert repo.get_by_id(res.json()["id"]).title == "Shared"

    def test_stores_are_independent_per_app(self):
        with make_client() as client_a:
            client_a.post("/todo", json=create_todo_payload())
        with make_client() as client_b:
            res = client_b.get("/todo/1")
        assert res.status_code == 404


class TestDomainErrors:
    def test_empty_title(self):
        with make_client() as client:
            res = client.post("/todo", json=create_todo_payload(title=""))
        assert res.status_code == 400
        assert res.json() == {"error": "EmptyTitle", "message": "Title cannot be empty"}

    def test_whitespace_title_is_accepted(self):
        with make_client() as client:
            res = client.post("/todo", json=create_todo_payload(title="  "))
        assert res.status_code == 201
        assert res.json()["title"] == "  "

    def test_past_due_date(self):
        with make_client() as client:
            res = client.post("/todo", json=create_todo_payload(due_date=rfc3339(NOW - timedelta(hours=1))))
        assert res.status_code == 400
        assert res.json()["error"] == "PastDueDate"

    def test_due_date_equal_to_now_is_rejected(self):
        with make_client() as client:
            res = client.post("/todo", json=create_todo_payload(due_date=rfc3339(NOW)))
        assert res.status_code == 400
        assert res.json()["error"] == "PastDueDate"

    def test_malformed_due_date(self):
        with make_client() as client:
            res = client.post("/todo", json=create_todo_payload(due_date="not-a-date"))
        assert res.status_code == 400
        assert res.json() == {"error": "InvalidDueDate", "message": "Invalid due date format"}

    def test_due_date_without_seconds(self):
        with make_client() as client:
            res = client.post("/todo", json=create_todo_payload(due_date="2030-02-01T09:00Z"))
        assert res.status_code == 400
        assert res.json()["error"] == "InvalidDueDate"

    def test_empty_title_reported_before_bad_date(self):
        with make_client() as client:
            res = client.post("/todo", json=create_todo_payload(title="", due_date="not-a-date"))
        assert res.status_code == 400
        assert res.json()["error"] == "EmptyTitle"

    def test_rejected_create_does_not_consume_an_id(self):
        with make_client() as client:
            client.post("/todo", json=create_todo_payload(title=""))
            res = client.post("/todo", json=create_todo_payload(title="After"))
        assert res.json()["id"] == 1


class TestValidationErrors:
    def test_missing_fields(self):
        with make_client() as client:
            res = client.post("/todo", json={"title": "No date"})
        assert res.status_code == 422
        body = res.json()
        assert body.get("error") == "ValidationError"
        assert body.get("message") == "Request validation failed"
        assert isinstance(body.get("detail"), list)

    def test_unparseable_body(self):
        with make_client() as client:
            res = client.post("/todo", content=b"{not json", headers={"Content-Type": "application/json"})
        assert res.status_code == 422
        assert res.json().get("error") == "ValidationError"

    def test_non_integer_id(self):
        with make_client() as client:
            res = client.get("/todo/abc")
        assert res.status_code == 422
        assert res.json().get("error") == "ValidationError"
