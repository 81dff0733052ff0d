# app/routers/chat.py
from typing import Optional

from fastapi import APIRouter

from app.schemas.chat import ChatIn, ChatOut
from app.services.ai_service import send_message

router = APIRouter()


@router.post("", response_model=ChatOut)
def chat(body: Optional[ChatIn] = None):
    """Relay one user message to the AI provider; the exchange is not persisted here."""
    body = body or ChatIn()
    reply = send_message(body.message)
    return ChatOut(success=True, reply=reply)
