# app/routers/contact.py
import logging
from typing import Optional

from fastapi import APIRouter

from app.core.errors import ServerError, ValidationError
from app.schemas.contact import ContactIn
from app.services.mail_service import deliver_contact

logger = logging.getLogger(__name__)
router = APIRouter()

THANK_YOU = "Thank you for your message! We will get back to you soon."


@router.post("")
def send_contact(body: Optional[ContactIn] = None):
    body = body or ContactIn()
    fields = (body.name, body.email, body.subject, body.message)
    if not all(isinstance(f, str) and f.strip() for f in fields):
        raise ValidationError("All fields are required")

    try:
        deliver_contact(body.name.strip(), body.email.strip(), body.subject.strip(), body.message)
    except Exception:
        # delivery details stay in the log, the submitter only sees a generic failure
        logger.exception("Contact form error")
        raise ServerError("Server error sending message")

    return {"success": True, "message": THANK_YOU}
