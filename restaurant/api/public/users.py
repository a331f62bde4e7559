from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_user
from restaurant.core.permissions import ensure_authorized
from restaurant.core.security import get_password_hash, verify_password
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse
from restaurant.schemas.user import MembershipPurchase, User as UserSchema, UserSummary, UserUpdate
from restaurant.api.public.auth import serialize_user_summary

router = APIRouter(tags=["Users"])


def serialize_user(user: User) -> UserSchema:
    return UserSchema(
        user_id=user.user_id,
        name=user.name,
        email=user.email,
        phone=user.phone,
        is_admin=bool(user.is_admin),
        is_member=bool(user.is_member),
        created_at=user.created_at,
    )


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _apply_update(db: Session, target: User, data: UserUpdate, self_update: bool) -> User:
    """
    Shared body of both update-user endpoints.

    A user changing their own email or password must confirm the current
    password first; admins editing someone else skip that check.
    """
    changes = data.model_dump(exclude_unset=True, exclude={"old_password"})
    if not changes:
        raise HTTPException(status_code=400, detail="No fields provided for update")

    email_changed = data.email is not None and data.email != target.email
    if self_update and (email_changed or data.new_password):
        if not data.old_password:
            raise HTTPException(
                status_code=400,
                detail="Current password is required for security changes",
            )
        if not verify_password(data.old_password, target.password_hash):
            raise HTTPException(status_code=400, detail="Current password is incorrect")

    if email_changed:
        taken = db.query(User).filter(User.email == data.email, User.user_id != target.user_id).first()
        if taken:
            raise HTTPException(status_code=400, detail="Email already registered")
        target.email = data.email
    if data.name is not None:
        target.name = data.name
    if "phone" in changes:
        target.phone = data.phone
    if data.new_password:
        target.password_hash = get_password_hash(data.new_password)

    db.commit()
    db.refresh(target)
    return target


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@router.get("/users/me", response_model=DataResponse[UserSchema])
def get_me(current_user: User = Depends(get_current_user)):
    """Return the authenticated user's profile."""
    return DataResponse(data=serialize_user(current_user))


@router.get("/api/profile/{user_id}", response_model=DataResponse[UserSchema])
@router.get("/api/user/{user_id}", response_model=DataResponse[UserSchema])
def get_profile(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_authorized(current_user, owner_id=user_id)
    return DataResponse(data=serialize_user(_get_user_or_404(db, user_id)))


@router.put("/api/update-user", response_model=DataResponse[UserSchema])
def update_me(
    data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    user = _apply_update(db, current_user, data, self_update=True)
    return DataResponse(message="Profile updated successfully", data=serialize_user(user))


@router.put("/api/update-user/{user_id}", response_model=DataResponse[UserSchema])
def update_user(
    user_id: int,
    data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_authorized(current_user, owner_id=user_id)
    target = _get_user_or_404(db, user_id)
    user = _apply_update(db, target, data, self_update=(user_id == current_user.user_id))
    return DataResponse(message="Profile updated successfully", data=serialize_user(user))


# ---------------------------------------------------------------------------
# Membership purchase
# ---------------------------------------------------------------------------


@router.put("/api/users/membership", response_model=DataResponse[UserSummary])
def buy_membership(
    data: MembershipPurchase,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Flag the user as a member when both UserID and Email match. Idempotent."""
    ensure_authorized(current_user, owner_id=data.user_id)
    user: Optional[User] = db.query(User).filter(
        User.user_id == data.user_id, User.email == data.email
    ).first()
    if not user:
        raise HTTPException(status_code=404, detail="No user found with matching UserID and Email")

    if user.is_member:
        return DataResponse(message="User is already a member", data=serialize_user_summary(user))

    user.is_member = True
    db.commit()
    db.refresh(user)
    return DataResponse(
        message="User membership status updated successfully",
        data=serialize_user_summary(user),
    )
