import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from restaurant.db.session import get_db
from restaurant.core.config import settings
from restaurant.core.security import create_access_token, get_password_hash, verify_password

from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, MessageResponse
from restaurant.schemas.user import (
    AdminCreate,
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    UserCreate,
    UserSummary,
    VerifyUserRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


def serialize_user_summary(user: User) -> UserSummary:
    return UserSummary(
        user_id=user.user_id,
        name=user.name,
        email=user.email,
        phone=user.phone,
        is_admin=bool(user.is_admin),
        is_member=bool(user.is_member),
    )


def _create_user(db: Session, body: UserCreate, is_admin: bool) -> User:
    if db.query(User).filter(User.email == body.email).first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )
    user = User(
        name=body.name,
        email=body.email,
        phone=body.phone,
        password_hash=get_password_hash(body.password),
        is_admin=is_admin,
        is_member=False,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _find_by_email_and_phone(db: Session, email: str, phone: str) -> User:
    user = db.query(User).filter(User.email == email, User.phone == phone).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No account found with matching email and phone number",
        )
    return user


@router.post("/api/register-user", response_model=DataResponse[UserSummary], status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, db: Session = Depends(get_db)):
    """Create a customer account. Admin and member flags cannot be self-assigned."""
    user = _create_user(db, body, is_admin=False)
    return DataResponse(message="User registered successfully", data=serialize_user_summary(user))


@router.post("/api/register-admin", response_model=DataResponse[UserSummary], status_code=status.HTTP_201_CREATED)
def admin_register(body: AdminCreate, db: Session = Depends(get_db)):
    if body.admin_secret != settings.ADMIN_SECRET_KEY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin secret",
        )
    user = _create_user(db, body, is_admin=True)
    logger.info("Admin account %s registered", user.user_id)
    return DataResponse(message="Admin registered successfully", data=serialize_user_summary(user))


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == body.email).first()
    if not user or not verify_password(body.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return LoginResponse(
        token=create_access_token(subject=str(user.user_id)),
        user=serialize_user_summary(user),
    )


@router.post("/api/verify-user", response_model=MessageResponse)
def verify_user(body: VerifyUserRequest, db: Session = Depends(get_db)):
    """First step of the forgotten-password flow: check email and phone match an account."""
    _find_by_email_and_phone(db, body.email, body.phone)
    return MessageResponse(message="Account verified")


@router.put("/api/reset-password", response_model=MessageResponse)
def reset_password(body: ResetPasswordRequest, db: Session = Depends(get_db)):
    user = _find_by_email_and_phone(db, body.email, body.phone)
    user.password_hash = get_password_hash(body.new_password)
    db.commit()
    return MessageResponse(message="Password updated successfully")
