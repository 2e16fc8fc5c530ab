import pytest

from dept_events.core.exceptions import Forbidden
from dept_events.core.permissions import authorize, can_manage
from dept_events.models.enums import UserRole


class _Event:
    def __init__(self, organizer_id):
        self.organizer_id = organizer_id


def test_authorize_allows_listed_role():
    authorize(UserRole.HOD, (UserRole.ADMIN, UserRole.HOD))
    authorize("ADMIN", (UserRole.ADMIN,))


@pytest.mark.parametrize("role", [UserRole.STUDENT, UserRole.FACULTY, "JANITOR", None])
def test_authorize_rejects_other_roles(role):
    with pytest.raises(Forbidden):
        authorize(role, (UserRole.ADMIN, UserRole.HOD))


def test_can_manage_organizer_or_admin():
    event = _Event(organizer_id=7)

    assert can_manage(event, 7, UserRole.FACULTY)
    assert can_manage(event, 99, UserRole.ADMIN)
    assert not can_manage(event, 99, UserRole.FACULTY)
    assert not can_manage(event, 99, UserRole.HOD)
