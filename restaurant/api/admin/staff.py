from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_admin_user
from restaurant.api.public.menu import serialize_staff
from restaurant.models.staff import Staff
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, ListResponse, MessageResponse
from restaurant.schemas.staff import Staff as StaffSchema, StaffCreate

router = APIRouter(prefix="/staff", tags=["Admin - Staff"])


@router.get("", response_model=ListResponse[StaffSchema])
def list_staff(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    staff = db.query(Staff).order_by(Staff.staff_id).all()
    return ListResponse(count=len(staff), data=[serialize_staff(s) for s in staff])


@router.post("", response_model=DataResponse[StaffSchema], status_code=status.HTTP_201_CREATED)
def create_staff(
    data: StaffCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    member = Staff(**data.model_dump())
    db.add(member)
    db.commit()
    db.refresh(member)
    return DataResponse(message="Staff created successfully", data=serialize_staff(member))


@router.delete("/{staff_id}", response_model=MessageResponse)
def delete_staff(
    staff_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    member = db.query(Staff).filter(Staff.staff_id == staff_id).first()
    if not member:
        raise HTTPException(status_code=404, detail="Staff not found")
    db.delete(member)
    db.commit()
    return MessageResponse(message="Staff deleted successfully")
