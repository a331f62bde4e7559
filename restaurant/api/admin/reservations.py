from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session, joinedload

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_admin_user
from restaurant.api.public.reservations import get_reservation_or_404, serialize_reservation
from restaurant.models.reservation import Reservation
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, ListResponse
from restaurant.schemas.reservation import Reservation as ReservationSchema, ReservationStatusUpdate

router = APIRouter(tags=["Admin - Reservations"])


@router.get("/reservations", response_model=ListResponse[ReservationSchema])
def list_all_reservations(
    # --- Filters ---
    on_date: Optional[date] = Query(None, alias="date", description="Filter by reservation date (YYYY-MM-DD)"),
    user_id: Optional[int] = Query(None, alias="userID"),
    table_id: Optional[int] = Query(None, alias="tableID"),
    status: Optional[str] = Query(None, description="Filter by status (Pending, Confirmed, Completed, Cancelled)"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Every reservation, newest date first and earliest hour first within a day."""
    query = db.query(Reservation).options(
        joinedload(Reservation.user),
        joinedload(Reservation.table),
    )
    if on_date:
        query = query.filter(Reservation.date == on_date)
    if user_id:
        query = query.filter(Reservation.user_id == user_id)
    if table_id:
        query = query.filter(Reservation.table_id == table_id)
    if status:
        query = query.filter(Reservation.status == status)

    reservations = query.order_by(Reservation.date.desc(), Reservation.start_time.asc()).all()
    return ListResponse(
        count=len(reservations),
        data=[serialize_reservation(r) for r in reservations],
    )


@router.put("/reservation/{reservation_id}/status", response_model=DataResponse[ReservationSchema])
def update_reservation_status(
    reservation_id: int,
    data: ReservationStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Set any known status; transitions are not restricted."""
    reservation = get_reservation_or_404(db, reservation_id)
    reservation.status = data.status.value
    db.commit()
    db.refresh(reservation)
    return DataResponse(
        message=f'Status for reservation ID {reservation_id} updated to "{reservation.status}".',
        data=serialize_reservation(reservation),
    )
