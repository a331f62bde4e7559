from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_admin_user
from restaurant.api.public.auth import serialize_user_summary
from restaurant.api.public.users import serialize_user
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, ListResponse
from restaurant.schemas.user import AdminInfo, MemberGrant, User as UserSchema, UserSummary

router = APIRouter(prefix="/api", tags=["Admin - Users"])


@router.get("/users", response_model=ListResponse[UserSchema])
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    users = db.query(User).order_by(User.user_id).all()
    return ListResponse(count=len(users), data=[serialize_user(u) for u in users])


@router.get("/admin-info", response_model=DataResponse[AdminInfo])
def admin_info(current_user: User = Depends(get_current_admin_user)):
    return DataResponse(data=AdminInfo(name=current_user.name, email=current_user.email))


# ---------------------------------------------------------------------------
# Membership management
# ---------------------------------------------------------------------------


@router.get("/members", response_model=ListResponse[UserSummary])
def list_members(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    members = db.query(User).filter(User.is_member.is_(True)).order_by(User.name).all()
    return ListResponse(count=len(members), data=[serialize_user_summary(m) for m in members])


@router.post("/members", response_model=DataResponse[UserSummary])
def grant_membership(
    data: MemberGrant,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Mark the user matching both Name and Email as a member."""
    user = db.query(User).filter(User.name == data.name, User.email == data.email).first()
    if not user:
        raise HTTPException(status_code=404, detail="No user found with matching Name and Email")

    if user.is_member:
        return DataResponse(message="User is already a member", data=serialize_user_summary(user))

    user.is_member = True
    db.commit()
    db.refresh(user)
    return DataResponse(message="Membership granted", data=serialize_user_summary(user))


@router.put("/members/{user_id}/remove", response_model=DataResponse[UserSummary])
def revoke_membership(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    user = db.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    user.is_member = False
    db.commit()
    db.refresh(user)
    return DataResponse(message="Membership removed", data=serialize_user_summary(user))
