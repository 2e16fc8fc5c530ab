"""
Event registry.

Events start PENDING with a zero registration counter. Details are edited by
the organizer or an Admin; status only moves through the approval workflow.
"""
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from dept_events.core.exceptions import Forbidden, NotFound, ValidationError
from dept_events.core.logging_config import get_logger
from dept_events.core.permissions import can_manage
from dept_events.models.enums import EventStatus
from dept_events.models.event import Event
from dept_events.models.registration import Registration
from dept_events.schemas.event import EventCreate, EventUpdate

logger = get_logger()


def _validated(model, fields):
    if isinstance(fields, model):
        return fields
    try:
        return model.model_validate(fields)
    except PydanticValidationError as e:
        problems = ", ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError(f"Invalid event data ({problems})")


# ---------------------------------------------------------------------
# CREATE
# ---------------------------------------------------------------------
def create_event(db: Session, fields, organizer_id: int) -> Event:
    data = _validated(EventCreate, fields)

    event = Event(
        **data.model_dump(),
        organizer_id=organizer_id,
        status=EventStatus.PENDING,
        registrations_count=0,
    )

    db.add(event)
    db.commit()
    db.refresh(event)

    logger.info(f"Event Created | Event={event.id} | Organizer={organizer_id} | Dept={event.department.value}")

    return event


# ---------------------------------------------------------------------
# QUERIES
# ---------------------------------------------------------------------
def get_event(db: Session, event_id: int) -> Event:
    event = (
        db.query(Event)
        .options(joinedload(Event.organizer))
        .filter(Event.id == event_id)
        .first()
    )
    if not event:
        raise NotFound("Event not found")
    return event


def list_approved_events(db: Session, department=None, start_date=None, end_date=None):
    query = (
        db.query(Event)
        .options(joinedload(Event.organizer))
        .filter(Event.status == EventStatus.APPROVED)
    )

    if department:
        query = query.filter(Event.department == department)
    if start_date:
        query = query.filter(Event.date >= start_date)
    if end_date:
        query = query.filter(Event.date <= end_date)

    return query.order_by(Event.date.asc()).all()


def list_all_events(db: Session, department=None, status=None):
    query = db.query(Event).options(joinedload(Event.organizer))

    if department:
        query = query.filter(Event.department == department)
    if status:
        query = query.filter(Event.status == status)

    return query.order_by(Event.created_at.desc(), Event.id.desc()).all()


# ---------------------------------------------------------------------
# UPDATE (details only, never status)
# ---------------------------------------------------------------------
def update_event(db: Session, event_id: int, fields, caller_id: int, caller_role) -> Event:
    event = get_event(db, event_id)

    if not can_manage(event, caller_id, caller_role):
        raise Forbidden("Not authorized to update this event")

    changes = _validated(EventUpdate, fields).model_dump(exclude_none=True)

    if "capacity" in changes:
        capacity = changes.pop("capacity")
        # Conditional write so a concurrent registration cannot slip past the new limit
        applied = db.execute(
            update(Event)
            .where(Event.id == event_id, Event.registrations_count <= capacity)
            .values(capacity=capacity)
            .execution_options(synchronize_session=False)
        ).rowcount
        if not applied:
            db.rollback()
            raise ValidationError(
                f"Capacity cannot be lower than current registrations ({event.registrations_count})"
            )

    for field, value in changes.items():
        setattr(event, field, value)

    db.commit()
    db.refresh(event)

    logger.info(f"Event Updated | Event={event.id} | By={caller_id}")

    return event


# ---------------------------------------------------------------------
# DELETE (cascades registrations)
# ---------------------------------------------------------------------
def delete_event(db: Session, event_id: int, caller_id: int, caller_role) -> None:
    event = get_event(db, event_id)

    if not can_manage(event, caller_id, caller_role):
        raise Forbidden("Not authorized to delete this event")

    # Registrations first, event last, one transaction: a failure keeps the event
    try:
        removed = (
            db.query(Registration)
            .filter(Registration.event_id == event_id)
            .delete(synchronize_session=False)
        )
        db.query(Event).filter(Event.id == event_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Event delete rolled back | Event={event_id}")
        raise

    db.expunge(event)

    logger.info(f"Event Deleted | Event={event_id} | By={caller_id} | Registrations removed={removed}")
