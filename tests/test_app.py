import pytest

from app.core.errors import DatabaseError
from app.db.session import check_connection, query


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["status"] == "ok"
    assert body["database"] is True


def test_unknown_route_is_uniform_404(client):
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Route not found"}


def test_malformed_json_is_400(client):
    res = client.post(
        "/api/contact",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["success"] is False


def test_query_binds_parameters():
    query(
        "INSERT INTO resources (title, category) VALUES (:title, :category)",
        {"title": "Breathing", "category": "coping"},
    )
    rows = query("SELECT title FROM resources WHERE category = :c", {"c": "coping"})
    assert rows == [{"title": "Breathing"}]

    injected = query("SELECT title FROM resources WHERE category = :c", {"c": "' OR '1'='1"})
    assert injected == []


def test_query_failure_raises_database_error():
    with pytest.raises(DatabaseError):
        query("SELECT * FROM no_such_table")
    # the connection went back to the pool; the next call still works
    assert check_connection() is True
