# app/routers/moods.py
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.core.security import SessionContext, require_session
from app.db.session import get_db
from app.models.mood import Mood
from app.schemas.mood import MoodIn

logger = logging.getLogger(__name__)
router = APIRouter()

MIN_MOOD_LEVEL = 1
MAX_MOOD_LEVEL = 5


def parse_mood_level(value: Any) -> int:
    """Accept integral numbers in [1, 5]; bool is not a number here."""
    if value is None:
        raise ValidationError("Missing required field. Please provide mood_level.")

    invalid = ValidationError(
        f"Invalid mood_level. Must be a number between {MIN_MOOD_LEVEL} and {MAX_MOOD_LEVEL}."
    )
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise invalid
    if isinstance(value, float) and not value.is_integer():
        raise invalid
    if not MIN_MOOD_LEVEL <= value <= MAX_MOOD_LEVEL:
        raise invalid
    return int(value)


def parse_notes(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("Invalid notes. Must be a string.")
    return value.strip() or None


@router.post("", status_code=201)
def create_mood(
    body: Optional[MoodIn] = None,
    session: SessionContext = Depends(require_session),
    db: Session = Depends(get_db),
):
    body = body or MoodIn()
    mood_level = parse_mood_level(body.mood_level)
    notes = parse_notes(body.notes)

    mood = Mood(user_id=session.user_id, mood_level=mood_level, notes=notes)
    db.add(mood)
    db.commit()
    db.refresh(mood)

    logger.info("Mood logged: id=%s user_id=%s level=%s", mood.id, session.user_id, mood_level)
    return {
        "success": True,
        "message": "Mood logged successfully.",
        "mood": mood.to_dict(),
    }


@router.get("")
def list_moods(
    session: SessionContext = Depends(require_session),
    db: Session = Depends(get_db),
):
    moods = (
        db.query(Mood)
        .filter(Mood.user_id == session.user_id)
        .order_by(Mood.created_at.desc(), Mood.id.asc())
        .all()
    )
    return {
        "success": True,
        "count": len(moods),
        "moods": [m.to_dict() for m in moods],
    }
