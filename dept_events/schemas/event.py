from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from dept_events.models.enums import Department, EventStatus
from dept_events.schemas.user import UserSummary


def strip_required_text(v):
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v


class EventBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    department: Department
    date: datetime
    venue: str = Field(..., min_length=1)
    capacity: Optional[int] = Field(None, ge=1)


class EventCreate(EventBase):

    @field_validator("title", "venue")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_required_text(v)


class EventUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    date: Optional[datetime] = None
    venue: Optional[str] = Field(None, min_length=1)
    capacity: Optional[int] = Field(None, ge=1)

    @field_validator("title", "venue")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        return strip_required_text(v)


class StatusUpdate(BaseModel):
    status: str


class EventOut(EventBase):
    id: int
    status: EventStatus
    registrations_count: int
    organizer: UserSummary
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class EventSummary(BaseModel):
    id: int
    title: str
    description: str
    date: datetime
    venue: str
    status: EventStatus
    department: Department

    model_config = {"from_attributes": True}
