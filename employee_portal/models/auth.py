"""Authentication request and response models."""

from __future__ import annotations

from pydantic import BaseModel


class Credentials(BaseModel):
    email: str = ""
    password: str = ""


class ResetEmailRequest(BaseModel):
    email: str = ""


class AuthUser(BaseModel):
    uid: str
    email: str | None = None
    displayName: str | None = None  # noqa: N815


class AuthResponse(BaseModel):
    message: str
    user: AuthUser


class MessageResponse(BaseModel):
    message: str
