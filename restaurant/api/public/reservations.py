import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, joinedload

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_user
from restaurant.core.permissions import ensure_authorized
from restaurant.models.order import Order
from restaurant.models.reservation import Reservation, ReservationStatus
from restaurant.models.table import Table
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, ListResponse, MessageResponse
from restaurant.schemas.reservation import Reservation as ReservationSchema, ReservationCancel, ReservationCreate
from restaurant.utils.availability import find_conflicting_reservations, validate_window

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Reservations"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def serialize_reservation(reservation: Reservation) -> ReservationSchema:
    """Convert a Reservation ORM object to its schema representation."""
    return ReservationSchema(
        reservation_id=reservation.reservation_id,
        user_id=reservation.user_id,
        user_name=reservation.user.name if reservation.user else None,
        table_id=reservation.table_id,
        table_location=reservation.table.location if reservation.table else None,
        table_capacity=reservation.table.capacity if reservation.table else None,
        on_date=reservation.date,
        start_time=reservation.start_time,
        end_time=reservation.end_time,
        people=reservation.people,
        status=reservation.status,
        satisfaction_rating=reservation.satisfaction_rating,
    )


def _reservation_query(db: Session):
    return db.query(Reservation).options(
        joinedload(Reservation.user),
        joinedload(Reservation.table),
    )


def get_reservation_or_404(db: Session, reservation_id: int) -> Reservation:
    reservation = _reservation_query(db).filter(Reservation.reservation_id == reservation_id).first()
    if not reservation:
        raise HTTPException(status_code=404, detail="Reservation not found")
    return reservation


# ---------------------------------------------------------------------------
# POST /reservations
# ---------------------------------------------------------------------------


@router.post("/reservations", response_model=DataResponse[ReservationSchema], status_code=status.HTTP_201_CREATED)
def create_reservation(
    data: ReservationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Reserve a table for `[StartTime, EndTime)` on `Date`.

    The table row is locked for the rest of the transaction and the overlap
    check is repeated under that lock, so two concurrent requests for the
    same table cannot both succeed (PostgreSQL; SQLite serializes writers).
    """
    ensure_authorized(current_user, owner_id=data.user_id)

    problem = validate_window(data.on_date, data.start_time, data.end_time, today=date.today())
    if problem:
        raise HTTPException(status_code=400, detail=problem)

    if not db.query(User.user_id).filter(User.user_id == data.user_id).first():
        raise HTTPException(status_code=404, detail="User not found")

    table = (
        db.query(Table)
        .filter(Table.table_id == data.table_id)
        .with_for_update()
        .first()
    )
    if not table:
        raise HTTPException(status_code=404, detail="Table not found")
    if data.people > table.capacity:
        raise HTTPException(
            status_code=400,
            detail=f"Table {table.table_id} seats at most {table.capacity} people",
        )

    conflicts = find_conflicting_reservations(
        db, table.table_id, data.on_date, data.start_time, data.end_time
    )
    if conflicts:
        logger.info(
            "Reservation conflict: table %s on %s [%s, %s) overlaps reservation %s",
            table.table_id, data.on_date, data.start_time, data.end_time,
            conflicts[0].reservation_id,
        )
        raise HTTPException(
            status_code=409,
            detail="Table is already reserved during the requested time",
        )

    reservation = Reservation(
        user_id=data.user_id,
        table_id=table.table_id,
        date=data.on_date,
        start_time=data.start_time,
        end_time=data.end_time,
        people=data.people,
    )
    db.add(reservation)
    db.commit()

    logger.info(
        "Reservation %s created for user %s at table %s",
        reservation.reservation_id, reservation.user_id, reservation.table_id,
    )
    reservation = get_reservation_or_404(db, reservation.reservation_id)
    return DataResponse(
        message="Reservation created successfully",
        data=serialize_reservation(reservation),
    )


# ---------------------------------------------------------------------------
# GET /reservationsByUserId/{user_id}
# ---------------------------------------------------------------------------


@router.get("/reservationsByUserId/{user_id}", response_model=ListResponse[ReservationSchema])
def list_user_reservations(
    user_id: int,
    status: Optional[str] = Query(None, description="Filter by status: Pending, Confirmed, Completed, Cancelled"),
    from_date: Optional[date] = Query(None, alias="fromDate"),
    to_date: Optional[date] = Query(None, alias="toDate"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Return one user's reservations, most recent first."""
    ensure_authorized(current_user, owner_id=user_id)

    query = _reservation_query(db).filter(Reservation.user_id == user_id)
    if status:
        query = query.filter(Reservation.status == status)
    if from_date:
        query = query.filter(Reservation.date >= from_date)
    if to_date:
        query = query.filter(Reservation.date <= to_date)

    reservations = query.order_by(Reservation.date.desc(), Reservation.start_time.desc()).all()
    return ListResponse(
        count=len(reservations),
        data=[serialize_reservation(r) for r in reservations],
    )


# ---------------------------------------------------------------------------
# GET /reservations/{id}
# ---------------------------------------------------------------------------


@router.get("/reservations/{reservation_id}", response_model=DataResponse[ReservationSchema])
def get_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    reservation = get_reservation_or_404(db, reservation_id)
    ensure_authorized(current_user, owner_id=reservation.user_id)
    return DataResponse(data=serialize_reservation(reservation))


# ---------------------------------------------------------------------------
# PUT /reservations/{id}: cancel
# ---------------------------------------------------------------------------


@router.put("/reservations/{reservation_id}", response_model=DataResponse[ReservationSchema])
def cancel_reservation(
    reservation_id: int,
    data: ReservationCancel,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Mark a reservation Cancelled. The row stays, and so does its hold on the
    table; deleting the reservation is what frees the slot.
    """
    reservation = get_reservation_or_404(db, reservation_id)
    ensure_authorized(current_user, owner_id=reservation.user_id)

    reservation.status = ReservationStatus.cancelled.value
    db.commit()
    logger.info("Reservation %s cancelled by user %s", reservation_id, current_user.user_id)

    reservation = get_reservation_or_404(db, reservation_id)
    return DataResponse(
        message=f"Reservation with ID {reservation_id} has been cancelled.",
        data=serialize_reservation(reservation),
    )


# ---------------------------------------------------------------------------
# DELETE /reservation/{id}
# ---------------------------------------------------------------------------


@router.delete("/reservation/{reservation_id}", response_model=MessageResponse)
def delete_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a reservation outright, releasing its table for the window."""
    reservation = get_reservation_or_404(db, reservation_id)
    ensure_authorized(current_user, owner_id=reservation.user_id)

    if db.query(Order.order_id).filter(Order.reservation_id == reservation_id).first():
        raise HTTPException(status_code=400, detail="Cannot delete reservation with existing orders")

    db.delete(reservation)
    db.commit()
    return MessageResponse(message=f"Reservation with ID {reservation_id} has been deleted.")
