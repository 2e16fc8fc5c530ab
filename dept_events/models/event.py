from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, ForeignKey, Index, CheckConstraint, func
from sqlalchemy.orm import relationship
from dept_events.db.session import Base
from dept_events.models.enums import Department, EventStatus


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)

    # Ownership
    organizer_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    department = Column(Enum(Department, name="department"), nullable=False)
    date = Column(DateTime, nullable=False)
    venue = Column(String, nullable=False)

    status = Column(
        Enum(EventStatus, name="eventstatus"),
        nullable=False,
        default=EventStatus.PENDING,
    )

    # NULL capacity = unlimited
    capacity = Column(Integer, nullable=True)
    registrations_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("capacity IS NULL OR capacity >= 1", name="ck_events_capacity_min"),
        CheckConstraint("registrations_count >= 0", name="ck_events_registrations_count_min"),
        CheckConstraint(
            "capacity IS NULL OR registrations_count <= capacity",
            name="ck_events_registrations_within_capacity",
        ),
        Index("ix_events_department_status_date", "department", "status", "date"),
    )

    # RELATIONSHIPS -------------------------------------

    organizer = relationship("User", back_populates="events")

    # Registrations are removed explicitly by the delete workflow
    registrations = relationship("Registration", back_populates="event", passive_deletes=True)
