from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from dept_events.core.dependencies import get_db, get_current_user, require_roles
from dept_events.models.enums import Department, EventStatus, UserRole
from dept_events.models.user import User
from dept_events.schemas.common import ApiResponse, ApiListResponse, MessageResponse
from dept_events.schemas.event import EventCreate, EventUpdate, EventOut, StatusUpdate
from dept_events.services import events as event_service
from dept_events.services.approvals import set_status

router = APIRouter(prefix="/events", tags=["Events"])


def _one(event, message: Optional[str] = None):
    return ApiResponse[EventOut](message=message, data=EventOut.model_validate(event))


def _many(events):
    return ApiListResponse[EventOut](
        count=len(events),
        data=[EventOut.model_validate(e) for e in events],
    )


# =====================================================================
# CREATE EVENT  (Faculty, Admin)
# =====================================================================
@router.post("", response_model=ApiResponse[EventOut], status_code=201)
def create_event(
    data: EventCreate,
    user: User = Depends(require_roles(UserRole.FACULTY, UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    event = event_service.create_event(db, data, user.id)
    return _one(event, "Event created successfully")


# =====================================================================
# LIST APPROVED EVENTS  (Public)
# =====================================================================
@router.get("", response_model=ApiListResponse[EventOut])
def list_approved_events(
    department: Optional[Department] = None,
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    db: Session = Depends(get_db)
):
    return _many(event_service.list_approved_events(db, department, start_date, end_date))


# =====================================================================
# LIST ALL EVENTS  (Faculty, Admin, HOD)
# =====================================================================
@router.get("/all", response_model=ApiListResponse[EventOut])
def list_all_events(
    department: Optional[Department] = None,
    status: Optional[EventStatus] = None,
    user: User = Depends(require_roles(UserRole.FACULTY, UserRole.ADMIN, UserRole.HOD)),
    db: Session = Depends(get_db)
):
    return _many(event_service.list_all_events(db, department, status))


# =====================================================================
# APPROVE / REJECT  (Admin, HOD)
# =====================================================================
@router.put("/status/{event_id}", response_model=ApiResponse[EventOut])
def update_event_status(
    event_id: int,
    data: StatusUpdate,
    user: User = Depends(require_roles(UserRole.ADMIN, UserRole.HOD)),
    db: Session = Depends(get_db)
):
    event = set_status(db, event_id, data.status, user.role)
    return _one(event, f"Event {event.status.value.lower()} successfully")


# =====================================================================
# EVENT DETAILS  (Public)
# =====================================================================
@router.get("/{event_id}", response_model=ApiResponse[EventOut])
def get_event(event_id: int, db: Session = Depends(get_db)):
    return _one(event_service.get_event(db, event_id))


# =====================================================================
# EDIT EVENT  (Organizer, Admin)
# =====================================================================
@router.put("/{event_id}", response_model=ApiResponse[EventOut])
def update_event(
    event_id: int,
    data: EventUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    event = event_service.update_event(db, event_id, data, user.id, user.role)
    return _one(event, "Event updated successfully")


# =====================================================================
# DELETE EVENT  (Organizer, Admin; removes registrations too)
# =====================================================================
@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(
    event_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    event_service.delete_event(db, event_id, user.id, user.role)
    return MessageResponse(message="Event deleted successfully")
