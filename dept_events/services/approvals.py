from sqlalchemy.orm import Session

from dept_events.core.exceptions import ValidationError
from dept_events.core.logging_config import get_logger
from dept_events.core.permissions import authorize
from dept_events.models.enums import EventStatus, UserRole
from dept_events.services.events import get_event

logger = get_logger()

APPROVERS = (UserRole.ADMIN, UserRole.HOD)
DECISIONS = (EventStatus.APPROVED.value, EventStatus.REJECTED.value)


def set_status(db: Session, event_id: int, new_status, caller_role):
    """
    Approve or reject an event.

    Any decision may overwrite any previous one, including re-approving a
    rejected event.
    """
    authorize(caller_role, APPROVERS)

    status = new_status.value if isinstance(new_status, EventStatus) else new_status
    if status not in DECISIONS:
        raise ValidationError("Invalid status")

    event = get_event(db, event_id)
    previous = event.status

    event.status = EventStatus(status)
    db.commit()
    db.refresh(event)

    logger.bind(log_type="admin").info(
        f"Event Status | Event={event.id} | {previous.value} -> {status} | Role={UserRole(caller_role).value}"
    )

    return event
