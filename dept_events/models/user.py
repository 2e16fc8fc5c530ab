from sqlalchemy import Column, Integer, String, DateTime, Enum, func
from sqlalchemy.orm import relationship
from dept_events.db.session import Base
from dept_events.models.enums import UserRole, Department


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    role = Column(Enum(UserRole, name="userrole"), nullable=False, default=UserRole.STUDENT)
    department = Column(Enum(Department, name="department"), nullable=False)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    # User → Events they organize
    events = relationship("Event", back_populates="organizer")
