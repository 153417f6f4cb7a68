from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr

from feedesk.core.enums import UserRole


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserInfo(BaseModel):
    id: str
    name: str
    email: EmailStr
    role: UserRole
    institution_id: Optional[str] = None


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserInfo
    issued_at: datetime


class CurrentUser(BaseModel):
    """Authenticated user resolved from the bearer token. Only name and role are shown by the dashboard."""

    id: str
    name: str
    email: EmailStr
    role: UserRole
    institution_id: Optional[str] = None
