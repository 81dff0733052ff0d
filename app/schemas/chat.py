from typing import Any, Optional
from pydantic import BaseModel

class ChatIn(BaseModel):
    message: Optional[Any] = None

class ChatOut(BaseModel):
    success: bool
    reply: str
