from datetime import date
from typing import List, Optional

from sqlalchemy import and_, not_, or_, select
from sqlalchemy.orm import Session, joinedload

from restaurant.models.reservation import Reservation
from restaurant.models.table import Table

FIRST_HOUR = 0
LAST_HOUR = 24


def intervals_overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """
    Half-open hour ranges ``[start, end)`` overlap unless one ends at or
    before the other starts. Touching ranges (9-12 and 12-15) do not overlap.
    """
    return not (end_a <= start_b or start_a >= end_b)


def validate_window(on_date: date, start_time: int, end_time: int, today: Optional[date] = None) -> Optional[str]:
    """Return a human readable problem with the requested window, or None."""
    today = today or date.today()
    if on_date < today:
        return "Reservation date must be today or in the future"
    if not (FIRST_HOUR <= start_time <= LAST_HOUR and FIRST_HOUR <= end_time <= LAST_HOUR):
        return f"startTime and endTime must be hours between {FIRST_HOUR} and {LAST_HOUR}"
    if end_time <= start_time:
        return "endTime must be after startTime"
    return None


def _conflict_filter(on_date: date, start_time: int, end_time: int):
    # Same predicate as intervals_overlap, expressed in SQL
    return and_(
        Reservation.date == on_date,
        not_(or_(Reservation.end_time <= start_time, Reservation.start_time >= end_time)),
    )


def find_available_tables(
    db: Session, on_date: date, start_time: int, end_time: int, capacity: int
) -> List[Table]:
    """
    Tables that seat at least ``capacity`` people and have no reservation
    on ``on_date`` overlapping ``[start_time, end_time)``, whatever its
    status. "No tables exist" and "every table is booked" both give an
    empty list.
    """
    booked = select(Reservation.table_id).where(
        _conflict_filter(on_date, start_time, end_time)
    )
    return (
        db.query(Table)
        .options(joinedload(Table.table_type))
        .filter(
            Table.capacity >= capacity,
            Table.table_id.notin_(booked),
        )
        .order_by(Table.table_id)
        .all()
    )


def find_conflicting_reservations(
    db: Session, table_id: int, on_date: date, start_time: int, end_time: int
) -> List[Reservation]:
    """Reservations of one table that overlap the requested window."""
    return (
        db.query(Reservation)
        .filter(
            Reservation.table_id == table_id,
            _conflict_filter(on_date, start_time, end_time),
        )
        .all()
    )
