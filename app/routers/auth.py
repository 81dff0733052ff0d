# app/routers/auth.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import AuthError, ConflictError, ServerError, ValidationError
from app.core.security import (
    clear_session_cookie,
    create_session,
    destroy_session,
    hash_password,
    load_session,
    session_id_from_request,
    set_session_cookie,
    verify_password,
)
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import LoginIn, SignupIn
from app.schemas.user import UserOut

logger = logging.getLogger(__name__)
router = APIRouter()

MIN_PASSWORD_LENGTH = 6


def _present(*values) -> bool:
    return all(isinstance(v, str) and v.strip() for v in values)


@router.post("/signup")
def signup(
    request: Request,
    response: Response,
    body: Optional[SignupIn] = None,
    db: Session = Depends(get_db),
):
    body = body or SignupIn()
    if not _present(body.username, body.email, body.password):
        raise ValidationError("All fields are required")

    if len(body.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    username = body.username.strip()
    email = body.email.strip()

    if db.query(User.id).filter(User.email == email).first():
        raise ConflictError("Email already registered")

    user = User(name=username, email=email, password=hash_password(body.password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # concurrent signup with the same email won the race
        db.rollback()
        raise ConflictError("Email already registered")
    db.refresh(user)

    session = create_session(db, user, replaces=session_id_from_request(request))
    set_session_cookie(response, session.id)
    logger.info("New user registered: id=%s", user.id)

    return {
        "success": True,
        "message": "Account created successfully",
        "user": UserOut.model_validate(user).model_dump(),
    }


@router.post("/login")
def login(
    request: Request,
    response: Response,
    body: Optional[LoginIn] = None,
    db: Session = Depends(get_db),
):
    body = body or LoginIn()
    if not _present(body.username, body.password):
        raise ValidationError("Username and password are required")

    identifier = body.username.strip()
    user = (
        db.query(User)
        .filter(or_(User.email == identifier, User.name == identifier))
        .order_by(User.id.asc())
        .first()
    )
    if user is None or not verify_password(body.password, user.password):
        raise AuthError("Invalid credentials")

    session = create_session(db, user, replaces=session_id_from_request(request))
    set_session_cookie(response, session.id)
    logger.info("User logged in: id=%s", user.id)

    return {
        "success": True,
        "message": "Login successful",
        "user": UserOut.model_validate(user).model_dump(),
    }


@router.post("/logout")
def logout(request: Request, response: Response, db: Session = Depends(get_db)):
    try:
        destroy_session(db, session_id_from_request(request))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Logout failed: %s", e)
        raise ServerError("Logout failed")

    clear_session_cookie(response)
    return {"success": True, "message": "Logged out successfully"}


@router.get("/status")
def status(request: Request, response: Response, db: Session = Depends(get_db)):
    try:
        session = load_session(db, session_id_from_request(request))
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Session lookup failed, reporting anonymous: %s", e)
        session = None

    if session is None:
        return {"authenticated": False}

    set_session_cookie(response, session.session_id)
    return {"authenticated": True, "user": session.user}
