from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dept_events.core.dependencies import get_db, get_current_user, require_roles
from dept_events.models.enums import UserRole
from dept_events.models.user import User
from dept_events.schemas.common import ApiResponse, ApiListResponse, MessageResponse
from dept_events.schemas.registration import RegistrationOut
from dept_events.services import registrations as registration_service

router = APIRouter(prefix="/registrations", tags=["Registrations"])


def _many(registrations):
    return ApiListResponse[RegistrationOut](
        count=len(registrations),
        data=[RegistrationOut.model_validate(r) for r in registrations],
    )


# ---------------------------------------------------------------------
# REGISTER FOR EVENT  (Student)
# ---------------------------------------------------------------------
@router.post("/{event_id}", response_model=ApiResponse[RegistrationOut], status_code=201)
def register_for_event(
    event_id: int,
    user: User = Depends(require_roles(UserRole.STUDENT)),
    db: Session = Depends(get_db)
):
    registration = registration_service.register(db, event_id, user.id)
    return ApiResponse[RegistrationOut](
        message="Successfully registered for the event",
        data=RegistrationOut.model_validate(registration),
    )


# ---------------------------------------------------------------------
# MY REGISTRATIONS
# ---------------------------------------------------------------------
@router.get("/user", response_model=ApiListResponse[RegistrationOut])
def my_registrations(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return _many(registration_service.list_for_user(db, user.id))


# ---------------------------------------------------------------------
# REGISTRATIONS OF AN EVENT  (Organizer, Admin)
# ---------------------------------------------------------------------
@router.get("/event/{event_id}", response_model=ApiListResponse[RegistrationOut])
def event_registrations(
    event_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return _many(registration_service.list_for_event(db, event_id, user.id, user.role))


# ---------------------------------------------------------------------
# UNREGISTER  (Student)
# ---------------------------------------------------------------------
@router.delete("/{event_id}", response_model=MessageResponse)
def unregister_from_event(
    event_id: int,
    user: User = Depends(require_roles(UserRole.STUDENT)),
    db: Session = Depends(get_db)
):
    registration_service.unregister(db, event_id, user.id)
    return MessageResponse(message="Successfully unregistered from the event")


# ---------------------------------------------------------------------
# CHECK-IN  (Organizer, Admin)
# ---------------------------------------------------------------------
@router.put("/checkin/{registration_id}", response_model=ApiResponse[RegistrationOut])
def check_in_attendee(
    registration_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    registration = registration_service.check_in(db, registration_id, user.id, user.role)
    return ApiResponse[RegistrationOut](
        message="Attendee checked in successfully",
        data=RegistrationOut.model_validate(registration),
    )
