from datetime import datetime
from pydantic import BaseModel

from dept_events.schemas.event import EventSummary
from dept_events.schemas.user import UserSummary


class RegistrationOut(BaseModel):
    id: int
    event_id: int
    user_id: int
    attended: bool
    registered_at: datetime

    event: EventSummary
    user: UserSummary

    model_config = {"from_attributes": True}
