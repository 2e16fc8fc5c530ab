"""
Registration workflow.

Admission to an event is decided by the database, not by this process:

* the seat is claimed with a single conditional ``UPDATE`` that only adds 1
  to ``registrations_count`` while the event is APPROVED and below capacity;
* the (event, user) pair is protected by ``uq_registration_event_user``.

Both happen in one transaction, so concurrent requests for the last seat end
with one success and one CapacityExceeded / Duplicate. The reads done before
the claim only produce friendlier error messages.
"""
from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from dept_events.core.exceptions import (
    CapacityExceeded,
    Duplicate,
    Forbidden,
    InvalidState,
    NotFound,
)
from dept_events.core.logging_config import get_logger
from dept_events.core.permissions import can_manage
from dept_events.models.enums import EventStatus
from dept_events.models.event import Event
from dept_events.models.registration import Registration
from dept_events.services.events import get_event

logger = get_logger()


def _check_admission(status, capacity, registrations_count):
    if status != EventStatus.APPROVED:
        raise InvalidState()
    if capacity is not None and registrations_count >= capacity:
        raise CapacityExceeded()


def _admission_failure(db: Session, event_id: int):
    """Work out why the conditional claim matched no row."""
    row = db.execute(
        select(Event.status, Event.capacity, Event.registrations_count).where(Event.id == event_id)
    ).first()
    if row is None:
        return NotFound("Event not found")
    try:
        _check_admission(row.status, row.capacity, row.registrations_count)
    except (InvalidState, CapacityExceeded) as e:
        return e
    # Row was busy but is admissible again; report it as full rather than retry
    return CapacityExceeded()


def _with_relations(db: Session, registration_id: int) -> Registration:
    return (
        db.query(Registration)
        .options(joinedload(Registration.event), joinedload(Registration.user))
        .filter(Registration.id == registration_id)
        .one()
    )


# ---------------------------------------------------------------------
# REGISTER
# ---------------------------------------------------------------------
def register(db: Session, event_id: int, user_id: int) -> Registration:
    event = db.get(Event, event_id)
    if not event:
        raise NotFound("Event not found")

    _check_admission(event.status, event.capacity, event.registrations_count)

    already = db.query(Registration.id).filter(
        Registration.event_id == event_id,
        Registration.user_id == user_id
    ).first()
    if already:
        raise Duplicate()

    # ---- CLAIM A SEAT (atomic add-1-if-below-limit) ----
    claimed = db.execute(
        update(Event)
        .where(
            Event.id == event_id,
            Event.status == EventStatus.APPROVED,
            or_(Event.capacity.is_(None), Event.registrations_count < Event.capacity),
        )
        .values(registrations_count=Event.registrations_count + 1)
        .execution_options(synchronize_session=False)
    ).rowcount

    if not claimed:
        db.rollback()
        raise _admission_failure(db, event_id)

    # ---- INSERT (unique on event_id + user_id) ----
    registration = Registration(event_id=event_id, user_id=user_id)
    db.add(registration)
    try:
        db.flush()
    except IntegrityError:
        # Undoes the seat claim as well
        db.rollback()
        raise Duplicate()

    registration_id = registration.id
    db.commit()

    logger.bind(log_type="registration").info(
        f"Registration Created | Event={event_id} | User={user_id} | Registration={registration_id}"
    )

    return _with_relations(db, registration_id)


# ---------------------------------------------------------------------
# UNREGISTER
# ---------------------------------------------------------------------
def unregister(db: Session, event_id: int, user_id: int) -> None:
    deleted = (
        db.query(Registration)
        .filter(Registration.event_id == event_id, Registration.user_id == user_id)
        .delete(synchronize_session=False)
    )
    if not deleted:
        db.rollback()
        raise NotFound("Registration not found")

    released = db.execute(
        update(Event)
        .where(Event.id == event_id, Event.registrations_count > 0)
        .values(registrations_count=Event.registrations_count - 1)
        .execution_options(synchronize_session=False)
    ).rowcount

    if not released:
        # Counter already 0 while a registration row existed; leave it clamped at 0
        logger.error(
            f"Invariant violation: registrations_count already 0 | Event={event_id} | User={user_id}"
        )

    db.commit()

    logger.bind(log_type="registration").info(f"Registration Removed | Event={event_id} | User={user_id}")


# ---------------------------------------------------------------------
# CHECK-IN
# ---------------------------------------------------------------------
def check_in(db: Session, registration_id: int, caller_id: int, caller_role) -> Registration:
    registration = db.get(Registration, registration_id)
    if not registration:
        raise NotFound("Registration not found")

    if not can_manage(registration.event, caller_id, caller_role):
        raise Forbidden("Not authorized to check-in attendees for this event")

    # Idempotent: a second check-in is a successful no-op
    if not registration.attended:
        registration.attended = True
        db.commit()

        logger.bind(log_type="registration").info(
            f"Checked In | Registration={registration_id} | Event={registration.event_id} | By={caller_id}"
        )

    return _with_relations(db, registration_id)


# ---------------------------------------------------------------------
# LISTINGS
# ---------------------------------------------------------------------
def list_for_user(db: Session, user_id: int):
    return (
        db.query(Registration)
        .options(joinedload(Registration.event), joinedload(Registration.user))
        .filter(Registration.user_id == user_id)
        .order_by(Registration.registered_at.desc(), Registration.id.desc())
        .all()
    )


def list_for_event(db: Session, event_id: int, caller_id: int, caller_role):
    event = get_event(db, event_id)

    if not can_manage(event, caller_id, caller_role):
        raise Forbidden("Not authorized to view registrations for this event")

    return (
        db.query(Registration)
        .options(joinedload(Registration.event), joinedload(Registration.user))
        .filter(Registration.event_id == event_id)
        .order_by(Registration.registered_at.desc(), Registration.id.desc())
        .all()
    )
