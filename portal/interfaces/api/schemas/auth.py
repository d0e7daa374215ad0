"""Authentication related schemas."""

from pydantic import BaseModel, Field

from .user import UserRead


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    access_token: str
    token_type: str
    user: UserRead


class MessageResponse(BaseModel):
    message: str
