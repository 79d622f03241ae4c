"""Pydantic models for authentication endpoints."""

from pydantic import BaseModel, Field
from typing import Optional


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: Optional[dict] = None


class AuthStatusResponse(BaseModel):
    authenticated: bool
    admin_id: Optional[int] = None
    email: Optional[str] = None
    role: Optional[str] = None
    display_name: Optional[str] = None


class ProfileUpdateRequest(BaseModel):
    display_name: str = Field(max_length=100)


class PasswordChangeRequest(BaseModel):
    current_password: str
    new_password: str = Field(min_length=6)


class EmailChangeRequest(BaseModel):
    email: str
    password: str
