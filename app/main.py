# app/main.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.errors import AppError, DatabaseError, NotFoundError
from app.db.base import Base
from app.db.session import check_connection, engine

# every model must be imported before create_all
from app.models.user import User  # noqa: F401
from app.models.mood import Mood  # noqa: F401
from app.models.message import Message  # noqa: F401
from app.models.resource import Resource  # noqa: F401
from app.models.user_session import UserSession  # noqa: F401

from app.routers import auth, chat, contact, messages, moods, resources

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("calmora")

APP_VERSION = "1.0.0"

app = FastAPI(
    title="Calmora Backend",
    version=APP_VERSION,
    description="Mental health support platform API",
)

# ============================================================================
# CORS
# ============================================================================

# localhost on any port is accepted, mirroring the development setup
_LOCAL_REGEX_STR = r"^http://(localhost|127\.0\.0\.1)(:\d+)?$"

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_origin_regex=_LOCAL_REGEX_STR,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)

# ============================================================================
# Error envelope
# ============================================================================

def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status_code)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return _envelope(exc.status_code, exc.message)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return _envelope(500, DatabaseError.default_message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return _envelope(400, "Invalid request body")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return _envelope(404, NotFoundError.default_message)
    if exc.status_code == 405:
        return _envelope(405, "Method not allowed")
    return _envelope(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(500, "Internal server error")

# ============================================================================
# Startup
# ============================================================================

@app.on_event("startup")
def on_startup():
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ready")
    except SQLAlchemyError as e:
        logger.warning("Table creation failed: %s", e)

    if not check_connection():
        logger.warning(
            "Database connection failed. API will start but database operations may fail."
        )
    logger.info("Calmora API started (env=%s)", settings.NODE_ENV)

# ============================================================================
# Routes
# ============================================================================

app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(moods.router, prefix="/api/moods", tags=["moods"])
app.include_router(messages.router, prefix="/api/messages", tags=["messages"])
app.include_router(resources.router, prefix="/api/resources", tags=["resources"])
app.include_router(chat.router, prefix="/api/chat", tags=["chat"])
app.include_router(contact.router, prefix="/api/contact", tags=["contact"])


@app.get("/api/health")
def health():
    return {
        "success": True,
        "status": "ok",
        "message": "Calmora API is running",
        "database": check_connection(),
    }


@app.get("/")
def root():
    return {
        "service": "Calmora API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/api/health",
        "endpoints": [
            "POST /api/auth/signup",
            "POST /api/auth/login",
            "POST /api/auth/logout",
            "GET /api/auth/status",
            "POST /api/moods",
            "GET /api/moods",
            "POST /api/messages",
            "GET /api/messages",
            "GET /api/resources",
            "POST /api/chat",
            "POST /api/contact",
            "GET /api/health",
        ],
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level="info")
