# distress/schemas/user.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UserCreate(BaseModel):
    name: str
    email: str
    password: str
    role: str = "officer"
    department: str = ""


class UserOut(BaseModel):
    # no password field: the hash never leaves the store
    id: int
    name: str
    email: str
    role: str
    department: str
    active: bool
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    email: str
    password: str
