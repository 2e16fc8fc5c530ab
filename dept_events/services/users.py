from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dept_events.core.exceptions import Conflict, Forbidden, NotFound, Unauthenticated
from dept_events.core.logging_config import get_logger
from dept_events.core.permissions import authorize
from dept_events.core.security import hash_password, verify_password
from dept_events.models.enums import UserRole
from dept_events.models.user import User
from dept_events.schemas.user import UserCreate

logger = get_logger()

# HOD / ADMIN are granted by an Admin, never self-assigned
SELF_SIGNUP_ROLES = (UserRole.STUDENT, UserRole.FACULTY)


def signup(db: Session, data: UserCreate) -> User:
    if data.role not in SELF_SIGNUP_ROLES:
        raise Forbidden(f"Cannot sign up as {data.role.value}")

    email = data.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise Conflict("User already exists")

    user = User(
        name=data.name,
        email=email,
        password_hash=hash_password(data.password),
        role=data.role,
        department=data.department,
    )

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("User already exists")
    db.refresh(user)

    logger.info(f"User Signed Up | User={user.id} | Role={user.role.value}")

    return user


def authenticate(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email.lower()).first()

    if not user or not verify_password(password, user.password_hash):
        raise Unauthenticated("Invalid credentials")

    return user


def list_users(db: Session):
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def update_role(db: Session, user_id: int, role, caller: User) -> User:
    authorize(caller.role, (UserRole.ADMIN,))

    user = db.get(User, user_id)
    if not user:
        raise NotFound("User not found")

    previous = user.role
    user.role = UserRole(role)
    db.commit()
    db.refresh(user)

    logger.bind(log_type="admin").info(
        f"Role Changed | User={user.id} | {previous.value} -> {user.role.value} | By={caller.id}"
    )

    return user
