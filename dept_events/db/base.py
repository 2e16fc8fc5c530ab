# Import every model so Base.metadata is complete for create_all / Alembic
from dept_events.db.session import Base
from dept_events.models.user import User
from dept_events.models.event import Event
from dept_events.models.registration import Registration
