# app/models/mood.py
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.core.timezone import format_utc, utc_now

class Mood(Base):
    __tablename__ = "moods"
    __table_args__ = (
        CheckConstraint("mood_level BETWEEN 1 AND 5", name="ck_moods_mood_level"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    mood_level = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)

    user = relationship("User", back_populates="moods", lazy="select")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "mood_level": self.mood_level,
            "notes": self.notes,
            "created_at": format_utc(self.created_at),
        }
