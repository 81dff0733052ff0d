# app/models/user.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.core.timezone import utc_now

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # passlib hash, never plaintext
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    moods = relationship("Mood", back_populates="user", lazy="select")
    messages = relationship("Message", back_populates="user", lazy="select")
    sessions = relationship("UserSession", back_populates="user", lazy="select")
