from typing import Iterable

from dept_events.core.exceptions import Forbidden
from dept_events.models.enums import UserRole


def authorize(caller_role, allowed_roles: Iterable[UserRole]) -> None:
    """Raise Forbidden unless ``caller_role`` is one of ``allowed_roles``."""
    try:
        role = UserRole(caller_role)
    except ValueError:
        raise Forbidden(f"Role {caller_role} is not allowed to access this route")

    if role not in set(allowed_roles):
        raise Forbidden(f"Role {role.value} is not allowed to access this route")


def can_manage(event, caller_id: int, caller_role) -> bool:
    """Organizer of the event or an Admin."""
    return event.organizer_id == caller_id or caller_role == UserRole.ADMIN
