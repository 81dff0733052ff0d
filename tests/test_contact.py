import smtplib

import pytest

from app.core.config import settings
from app.services import mail_service

FORM = {"name": "Ann", "email": "a@x.com", "subject": "Hello", "message": "line one\n<b>line two</b>"}


class FakeSMTP:
    sent = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        pass

    def login(self, user, password):
        self.user = user

    def send_message(self, msg):
        FakeSMTP.sent.append(msg)


@pytest.fixture
def smtp(monkeypatch):
    FakeSMTP.sent = []
    monkeypatch.setattr(settings, "SMTP_USER", "bot@calmora.test")
    monkeypatch.setattr(settings, "SMTP_PASS", "pw")
    monkeypatch.setattr(settings, "ADMIN_EMAIL", "admin@calmora.test")
    monkeypatch.setattr(mail_service.smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


def test_contact_requires_all_fields(client):
    res = client.post("/api/contact", json={"name": "Ann", "email": "a@x.com", "subject": "Hi"})
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "All fields are required"}


def test_contact_without_smtp_still_succeeds(client):
    res = client.post("/api/contact", json=FORM)
    assert res.status_code == 200
    assert res.json()["message"] == "Thank you for your message! We will get back to you soon."


def test_contact_sends_email(client, smtp):
    res = client.post("/api/contact", json=FORM)
    assert res.status_code == 200
    assert len(smtp.sent) == 1

    msg = smtp.sent[0]
    assert msg["Subject"] == "Calmora Contact: Hello"
    assert msg["To"] == "admin@calmora.test"
    html = msg.get_body(preferencelist=("html",)).get_content()
    assert "line one<br>&lt;b&gt;line two&lt;/b&gt;" in html


def test_contact_send_failure_is_500(client, smtp, monkeypatch):
    def boom(msg):
        raise smtplib.SMTPServerDisconnected("gone")

    monkeypatch.setattr(mail_service, "send_email", boom)
    res = client.post("/api/contact", json=FORM)
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Server error sending message"}


def test_contact_without_body(client):
    res = client.post("/api/contact")
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "All fields are required"}


def test_contact_multiline_header_fields_are_flattened(client, smtp):
    form = dict(FORM, subject="Hi\r\nBcc: x@y.z", name="Ann\nX-Extra: 1")
    res = client.post("/api/contact", json=form)
    assert res.status_code == 200
    assert len(smtp.sent) == 1

    msg = smtp.sent[0]
    assert msg["Subject"] == "Calmora Contact: Hi Bcc: x@y.z"
    assert msg["Bcc"] is None
    assert msg["X-Extra"] is None
    assert "\n" not in msg["Subject"]


def test_contact_unexpected_error_is_generic_500(client, smtp, monkeypatch):
    def boom(name, email, subject, message):
        raise ValueError("Header values may not contain linefeed or carriage return characters")

    monkeypatch.setattr("app.routers.contact.deliver_contact", boom)
    res = client.post("/api/contact", json=FORM)
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Server error sending message"}
