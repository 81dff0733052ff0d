from typing import Any, Optional
from pydantic import BaseModel

# Fields are typed loosely so that missing or malformed values reach the
# handler and get the documented 400 message instead of a generic 422.

class SignupIn(BaseModel):
    username: Optional[Any] = None
    email: Optional[Any] = None
    password: Optional[Any] = None

class LoginIn(BaseModel):
    username: Optional[Any] = None
    password: Optional[Any] = None
