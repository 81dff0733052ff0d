# app/services/mail_service.py
import html
import logging
import smtplib
from email.message import EmailMessage

from app.core.config import settings

logger = logging.getLogger(__name__)

SMTP_TIMEOUT = 30


def _header_value(value: str) -> str:
    # CR/LF would let a form field inject extra headers
    return " ".join(value.split())


def build_contact_email(name: str, email: str, subject: str, message: str) -> EmailMessage:
    name, email, subject = _header_value(name), _header_value(email), _header_value(subject)
    body = message.replace("\r\n", "\n")
    msg = EmailMessage()
    msg["Subject"] = f"Calmora Contact: {subject}"
    msg["From"] = settings.SMTP_USER
    msg["To"] = settings.ADMIN_EMAIL or settings.SMTP_USER
    msg["Reply-To"] = email
    msg.set_content(
        f"Name: {name}\nEmail: {email}\nSubject: {subject}\n\n{body}"
    )
    msg.add_alternative(
        "<h2>New Contact Form Submission</h2>"
        f"<p><strong>Name:</strong> {html.escape(name)}</p>"
        f"<p><strong>Email:</strong> {html.escape(email)}</p>"
        f"<p><strong>Subject:</strong> {html.escape(subject)}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{html.escape(body).replace(chr(10), '<br>')}</p>",
        subtype="html",
    )
    return msg


def send_email(msg: EmailMessage) -> None:
    with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=SMTP_TIMEOUT) as server:
        server.starttls()
        server.login(settings.SMTP_USER, settings.SMTP_PASS)
        server.send_message(msg)


def deliver_contact(name: str, email: str, subject: str, message: str) -> bool:
    """Mail the submission to the admin; returns False when SMTP is not configured."""
    if not settings.smtp_configured:
        logger.info(
            "Email not sent - SMTP not configured. name=%s email=%s subject=%s message=%s",
            name, email, subject, message,
        )
        return False

    send_email(build_contact_email(name, email, subject, message))
    logger.info("Contact email sent for %s", email)
    return True
