# app/routers/messages.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.core.security import (
    Authenticated,
    SessionContext,
    get_optional_session,
    owner_of,
    require_session,
)
from app.db.session import get_db
from app.models.message import Message
from app.schemas.message import MessageIn

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", status_code=201)
def create_message(
    body: Optional[MessageIn] = None,
    session: Optional[SessionContext] = Depends(get_optional_session),
    db: Session = Depends(get_db),
):
    """Store one chatbot exchange; anonymous visitors are logged without an owner."""
    body = body or MessageIn()
    if body.message is None or body.response is None or body.message == "" or body.response == "":
        raise ValidationError("Missing required fields. Please provide message and response.")

    if not isinstance(body.message, str) or not isinstance(body.response, str):
        raise ValidationError("Message and response must be strings.")

    if not body.message.strip() or not body.response.strip():
        raise ValidationError("Message and response cannot be empty.")

    owner = owner_of(session)
    user_id = owner.user_id if isinstance(owner, Authenticated) else None

    row = Message(user_id=user_id, message=body.message, response=body.response)
    db.add(row)
    db.commit()
    db.refresh(row)

    logger.info("Message stored: id=%s owner=%s", row.id, owner)
    return {
        "success": True,
        "message": "Message stored successfully.",
        "data": row.to_dict(),
    }


@router.get("")
def list_messages(
    session: SessionContext = Depends(require_session),
    db: Session = Depends(get_db),
):
    messages = (
        db.query(Message)
        .filter(Message.user_id == session.user_id)
        .order_by(Message.created_at.desc(), Message.id.asc())
        .all()
    )
    return {
        "success": True,
        "count": len(messages),
        "messages": [m.to_dict() for m in messages],
    }
