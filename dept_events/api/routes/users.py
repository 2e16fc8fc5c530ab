from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dept_events.core.dependencies import get_db, get_current_user, require_roles
from dept_events.models.enums import UserRole
from dept_events.models.user import User
from dept_events.schemas.common import ApiResponse, ApiListResponse
from dept_events.schemas.user import UserOut, RoleUpdate
from dept_events.services import users as user_service

router = APIRouter(prefix="/users", tags=["Users"])


# ==================================================
# CURRENT USER
# ==================================================
@router.get("/me", response_model=ApiResponse[UserOut])
def get_me(user: User = Depends(get_current_user)):
    return ApiResponse[UserOut](data=UserOut.model_validate(user))


# ==================================================
# GET ALL USERS (ADMIN)
# ==================================================
@router.get("", response_model=ApiListResponse[UserOut])
def get_all_users(
    admin: User = Depends(require_roles(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    users = user_service.list_users(db)
    return ApiListResponse[UserOut](
        count=len(users),
        data=[UserOut.model_validate(u) for u in users],
    )


# ==================================================
# UPDATE USER ROLE (ADMIN)
# ==================================================
@router.put("/role/{user_id}", response_model=ApiResponse[UserOut])
def update_user_role(
    user_id: int,
    data: RoleUpdate,
    admin: User = Depends(require_roles(UserRole.ADMIN)),
    db: Session = Depends(get_db)
):
    user = user_service.update_role(db, user_id, data.role, admin)
    return ApiResponse[UserOut](
        message="User role updated successfully",
        data=UserOut.model_validate(user),
    )
