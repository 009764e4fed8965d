from typing import Optional

from pydantic import BaseModel


# Login (Input) - fields are optional so a missing one is a 400, not a 422
class AdminLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool


class MessageResponse(BaseModel):
    message: str
