from typing import Any

from pydantic import BaseModel, Field


# Credentials are left untyped: a non-string value is a failed login or an
# unknown session, never a validation error.
class AdminLogin(BaseModel):
    password: Any = None


class AdminLoginResult(BaseModel):
    success: bool
    session_id: str | None = Field(default=None, alias="sessionId")
    message: str

    class Config:
        populate_by_name = True


class AdminVerify(BaseModel):
    session_id: Any = Field(default=None, alias="sessionId")

    class Config:
        populate_by_name = True
