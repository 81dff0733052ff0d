# app/core/security.py
import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

from fastapi import Depends, Request, Response
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import AuthError, DatabaseError
from app.core.timezone import utc_now
from app.db.session import get_db
from app.models.user import User
from app.models.user_session import UserSession

logger = logging.getLogger(__name__)

ALGORITHM = settings.SESSION_ALG
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


# ================= Passwords =================

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        # malformed stored hash
        return False


# ================= Session identity =================

@dataclass(frozen=True)
class SessionContext:
    """Identity attached to the current request by its session cookie."""
    session_id: str
    user_id: int
    user_name: str
    user_email: str

    @property
    def user(self) -> dict:
        return {"id": self.user_id, "name": self.user_name, "email": self.user_email}


@dataclass(frozen=True)
class Authenticated:
    user_id: int


@dataclass(frozen=True)
class Anonymous:
    pass


Owner = Union[Authenticated, Anonymous]


def owner_of(session: Optional[SessionContext]) -> Owner:
    if session is None:
        return Anonymous()
    return Authenticated(user_id=session.user_id)


# ================= Cookie signing =================

def sign_session_id(session_id: str) -> str:
    return jwt.encode({"sid": session_id}, settings.SESSION_SECRET, algorithm=ALGORITHM)

def unsign_session_id(token: str) -> Optional[str]:
    try:
        payload = jwt.decode(token, settings.SESSION_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) and sid else None

def set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE,
        value=sign_session_id(session_id),
        max_age=settings.SESSION_MAX_AGE,
        httponly=True,
        secure=settings.IS_PRODUCTION,
        samesite="lax",
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE,
        httponly=True,
        secure=settings.IS_PRODUCTION,
        samesite="lax",
    )

def session_id_from_request(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE)
    if not token:
        return None
    return unsign_session_id(token)


# ================= Session store =================

def create_session(db: Session, user: User, replaces: Optional[str] = None) -> UserSession:
    """Persist a fresh session for ``user``; an existing session id given in ``replaces`` is dropped."""
    if replaces:
        db.query(UserSession).filter(UserSession.id == replaces).delete()

    row = UserSession(
        id=secrets.token_urlsafe(32),
        user_id=user.id,
        user_name=user.name,
        user_email=user.email,
        created_at=utc_now(),
        expires_at=utc_now() + timedelta(seconds=settings.SESSION_MAX_AGE),
    )
    db.add(row)
    db.commit()
    return row

def load_session(db: Session, session_id: Optional[str]) -> Optional[SessionContext]:
    """Look up a live session and slide its expiry forward."""
    if not session_id:
        return None

    row = db.get(UserSession, session_id)
    if row is None:
        return None

    if row.is_expired():
        db.delete(row)
        db.commit()
        logger.info("Session expired for user_id=%s", row.user_id)
        return None

    row.expires_at = utc_now() + timedelta(seconds=settings.SESSION_MAX_AGE)
    db.commit()
    return SessionContext(
        session_id=row.id,
        user_id=row.user_id,
        user_name=row.user_name,
        user_email=row.user_email,
    )

def destroy_session(db: Session, session_id: Optional[str]) -> None:
    if not session_id:
        return
    db.query(UserSession).filter(UserSession.id == session_id).delete()
    db.commit()


# ================= Dependencies =================

def get_optional_session(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> Optional[SessionContext]:
    """Current session or None for anonymous requests; refreshes the cookie."""
    try:
        session = load_session(db, session_id_from_request(request))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Session lookup failed: %s", e)
        raise DatabaseError() from e

    if session is not None:
        set_session_cookie(response, session.session_id)
    return session

def require_session(
    session: Optional[SessionContext] = Depends(get_optional_session),
) -> SessionContext:
    if session is None:
        raise AuthError("Authentication required. Please log in.")
    return session
