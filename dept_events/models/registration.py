from datetime import datetime

from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from dept_events.db.session import Base


class Registration(Base):
    __tablename__ = "registrations"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    attended = Column(Boolean, default=False, nullable=False)
    registered_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # One registration per (event, user), enforced by the database
    __table_args__ = (UniqueConstraint("event_id", "user_id", name="uq_registration_event_user"),)

    event = relationship("Event", back_populates="registrations")
    user = relationship("User")
