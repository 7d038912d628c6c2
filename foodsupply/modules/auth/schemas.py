from pydantic import BaseModel
from typing import Optional


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: str


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: str


class MessageResponse(BaseModel):
    success: bool
    message: str


class TokenResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    token: str
