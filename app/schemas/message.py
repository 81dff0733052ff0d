from typing import Any, Optional
from pydantic import BaseModel

class MessageIn(BaseModel):
    message: Optional[Any] = None
    response: Optional[Any] = None
