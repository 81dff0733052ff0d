# app/models/resource.py
from sqlalchemy import Column, Integer, String, Text, DateTime
from app.db.base import Base
from app.core.timezone import format_utc, utc_now

class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    link = Column(String(500), nullable=True)
    category = Column(String(50), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "category": self.category,
            "created_at": format_utc(self.created_at),
        }
