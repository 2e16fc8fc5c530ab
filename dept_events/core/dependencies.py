from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from dept_events.db.session import SessionLocal
from dept_events.core.jwt import decode_access_token
from dept_events.core.exceptions import Unauthenticated
from dept_events.core.permissions import authorize
from dept_events.models.user import User
from dept_events.models.enums import UserRole

# auto_error=False so a missing header is reported as 401, not 403
security = HTTPBearer(auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    if credentials is None:
        raise Unauthenticated("Not authorized, no token")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise Unauthenticated("Not authorized, token failed")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid token payload")

    # Authorization uses the stored role, not the one baked into the token
    user = db.get(User, user_id)
    if not user:
        raise Unauthenticated("User not found")

    return user


def require_roles(*roles: UserRole):
    """Dependency: the authenticated user, provided their role is in ``roles``."""

    def checker(user: User = Depends(get_current_user)) -> User:
        authorize(user.role, roles)
        return user

    return checker
