from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from dept_events.models.enums import UserRole, Department


class UserBase(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    department: Department

    model_config = {"from_attributes": True}


class UserCreate(UserBase):
    password: str = Field(..., min_length=6)
    role: UserRole = UserRole.STUDENT

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserOut(UserBase):
    id: int
    role: UserRole
    created_at: Optional[datetime] = None


class UserSummary(BaseModel):
    id: int
    name: str
    email: str
    department: Department

    model_config = {"from_attributes": True}


class RoleUpdate(BaseModel):
    role: UserRole


class TokenOut(BaseModel):
    success: bool = True
    message: str
    access_token: str
    token_type: str = "bearer"
    user: UserOut
