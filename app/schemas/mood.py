from typing import Any, Optional
from pydantic import BaseModel

class MoodIn(BaseModel):
    mood_level: Optional[Any] = None
    notes: Optional[Any] = None
