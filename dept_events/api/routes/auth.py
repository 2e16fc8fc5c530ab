from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dept_events.core.dependencies import get_db
from dept_events.core.jwt import create_user_token
from dept_events.schemas.user import UserCreate, UserLogin, UserOut, TokenOut
from dept_events.services import users as user_service

router = APIRouter(prefix="/auth", tags=["Authentication"])


# =====================================================================
#                               SIGNUP
# =====================================================================
@router.post("/signup", response_model=TokenOut, status_code=201)
def signup(data: UserCreate, db: Session = Depends(get_db)):
    user = user_service.signup(db, data)

    return TokenOut(
        message="User registered successfully",
        access_token=create_user_token(user),
        user=UserOut.model_validate(user),
    )


# =====================================================================
#                               LOGIN
# =====================================================================
@router.post("/login", response_model=TokenOut)
def login(data: UserLogin, db: Session = Depends(get_db)):
    user = user_service.authenticate(db, data.email, data.password)

    return TokenOut(
        message="Login successful",
        access_token=create_user_token(user),
        user=UserOut.model_validate(user),
    )
