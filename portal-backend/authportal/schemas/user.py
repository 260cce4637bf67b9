# File: authportal/schemas/user.py

from typing import Optional

from pydantic import BaseModel


class UserCredentials(BaseModel):
    # Optional so that absent fields reach the handler and answer 400, not 422.
    email: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
