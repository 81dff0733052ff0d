from typing import Any, Optional
from pydantic import BaseModel

class ContactIn(BaseModel):
    name: Optional[Any] = None
    email: Optional[Any] = None
    subject: Optional[Any] = None
    message: Optional[Any] = None
