from datetime import datetime

from app.models.message import Message
from app.models.user import User

from conftest import signup


def test_anonymous_message_is_stored_without_owner(client, db):
    res = client.post("/api/messages", json={"message": "hello", "response": "hi there"})
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["data"]["user_id"] is None
    assert db.query(Message).count() == 1


def test_authenticated_message_is_owned(auth_client):
    me = auth_client.get("/api/auth/status").json()["user"]
    res = auth_client.post("/api/messages", json={"message": "hello", "response": "hi"})
    assert res.status_code == 201
    assert res.json()["data"]["user_id"] == me["id"]


def test_message_missing_fields(client):
    res = client.post("/api/messages", json={"message": "hello"})
    assert res.status_code == 400
    assert res.json()["error"] == "Missing required fields. Please provide message and response."


def test_message_non_string(client):
    res = client.post("/api/messages", json={"message": "hello", "response": 42})
    assert res.status_code == 400
    assert res.json()["error"] == "Message and response must be strings."


def test_message_blank(client):
    res = client.post("/api/messages", json={"message": "   ", "response": "hi"})
    assert res.status_code == 400
    assert res.json()["error"] == "Message and response cannot be empty."


def test_list_messages_requires_session(client):
    res = client.get("/api/messages")
    assert res.status_code == 401
    assert res.json()["success"] is False


def test_list_messages_only_own(make_client):
    ann = make_client()
    signup(ann)
    bob = make_client()
    signup(bob, username="bob", email="b@x.com")
    anon = make_client()

    ann.post("/api/messages", json={"message": "ann q", "response": "a"})
    bob.post("/api/messages", json={"message": "bob q", "response": "b"})
    anon.post("/api/messages", json={"message": "anon q", "response": "c"})

    body = ann.get("/api/messages").json()
    assert body["count"] == 1
    assert body["messages"][0]["message"] == "ann q"


def test_messages_newest_first(auth_client, db):
    user = db.query(User).one()
    db.add_all([
        Message(user_id=user.id, message="first", response="r", created_at=datetime(2024, 3, 1)),
        Message(user_id=user.id, message="second", response="r", created_at=datetime(2024, 3, 2)),
    ])
    db.commit()

    texts = [m["message"] for m in auth_client.get("/api/messages").json()["messages"]]
    assert texts == ["second", "first"]


def test_message_without_body(client, db):
    res = client.post("/api/messages")
    assert res.status_code == 400
    assert res.json()["error"] == "Missing required fields. Please provide message and response."
    assert db.query(Message).count() == 0
    assert Message.__table__.c.created_at.server_default is None
