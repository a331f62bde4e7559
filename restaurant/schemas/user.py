from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

from restaurant.schemas.common import APIModel


# Properties to receive via API on creation (POST /api/register-user)
class UserCreate(APIModel):
    name: str = Field(min_length=1, max_length=100, alias="Name")
    email: EmailStr = Field(alias="Email")
    password: str = Field(min_length=6, alias="Password")
    phone: Optional[str] = Field(None, max_length=20, alias="Phone")


# Properties to receive via API on admin creation (POST /api/register-admin)
class AdminCreate(UserCreate):
    admin_secret: str = Field(alias="AdminSecret")


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


# Properties to receive via API on update (PUT /api/update-user)
class UserUpdate(APIModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100, alias="Name")
    phone: Optional[str] = Field(None, max_length=20, alias="Phone")
    email: Optional[EmailStr] = Field(None, alias="Email")
    old_password: Optional[str] = Field(None, alias="OldPassword")
    new_password: Optional[str] = Field(None, min_length=6, alias="NewPassword")


# Properties returned via API
class User(APIModel):
    user_id: int = Field(alias="UserID")
    name: str = Field(alias="Name")
    email: str = Field(alias="Email")
    phone: Optional[str] = Field(None, alias="Phone")
    is_admin: bool = Field(alias="isAdmin")
    is_member: bool = Field(alias="isMember")
    created_at: Optional[datetime] = Field(None, alias="CreatedAt")


# Compact user returned with a token or in member lists
class UserSummary(APIModel):
    user_id: int = Field(alias="UserID")
    name: str = Field(alias="Name")
    email: str = Field(alias="Email")
    phone: Optional[str] = Field(None, alias="Phone")
    is_admin: bool = Field(False, alias="isAdmin")
    is_member: bool = Field(False, alias="isMember")


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    user: UserSummary


class AdminInfo(BaseModel):
    name: str
    email: str


class VerifyUserRequest(BaseModel):
    email: EmailStr
    phone: str = Field(min_length=1)


class ResetPasswordRequest(VerifyUserRequest):
    new_password: str = Field(min_length=6, alias="newPassword")


# Membership
class MemberGrant(APIModel):
    name: str = Field(min_length=1, alias="Name")
    email: EmailStr = Field(alias="Email")


class MembershipPurchase(APIModel):
    user_id: int = Field(alias="UserID")
    email: EmailStr = Field(alias="Email")
