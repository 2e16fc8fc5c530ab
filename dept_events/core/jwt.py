from datetime import datetime, timedelta
from jose import jwt, JWTError

from dept_events.core.config import JWT_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES


# -------- CREATE TOKEN --------
def create_access_token(data: dict, expires_delta: int | None = None):
    """Generate JWT token"""
    to_encode = data.copy()
    expire = datetime.utcnow() + timedelta(
        minutes=expires_delta if expires_delta else ACCESS_TOKEN_EXPIRE_MINUTES
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


def create_user_token(user) -> str:
    return create_access_token({"sub": str(user.id), "role": user.role.value})


# -------- DECODE TOKEN --------
def decode_access_token(token: str):
    """Decode JWT and return the payload, or None if invalid / expired"""
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None

    if "sub" not in payload or "role" not in payload:
        return None

    return payload
