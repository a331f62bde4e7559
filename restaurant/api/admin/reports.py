from fastapi import APIRouter, Depends
from sqlalchemy import case, desc, distinct, func
from sqlalchemy.orm import Session

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_admin_user
from restaurant.models.menu import MenuItem
from restaurant.models.order import Order, OrderDetail
from restaurant.models.reservation import Reservation
from restaurant.models.user import User
from restaurant.schemas.common import ListResponse
from restaurant.schemas.report import BusiestTime, PopularItem, RevenueByDay
from restaurant.utils.pricing import to_money

router = APIRouter(prefix="/api/reports", tags=["Admin - Reports"])

# Start-hour buckets for the busiest-times report: (label, first hour, last hour)
TIME_SLOTS = (
    ("Morning (8-11)", 8, 11),
    ("Lunch (12-14)", 12, 14),
    ("Afternoon (15-17)", 15, 17),
    ("Evening (18-23)", 18, 23),
)
OTHER_SLOT = "Other"


# ---------------------------------------------------------------------------
# GET /api/reports/revenue-by-day
# ---------------------------------------------------------------------------


@router.get("/revenue-by-day", response_model=ListResponse[RevenueByDay])
def revenue_by_day(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """
    Revenue of completed orders per day, split into reservation and walk-in
    orders. A reservation order counts on the reservation's date; a walk-in
    counts on the day it was placed.
    """
    day = func.coalesce(Reservation.date, func.date(Order.order_date))
    order_type = case(
        (Order.reservation_id.is_not(None), "Reservation"),
        else_="Walk-in",
    )

    rows = (
        db.query(
            day.label("day"),
            order_type.label("order_type"),
            func.sum(OrderDetail.quantity * OrderDetail.price).label("revenue"),
            func.count(distinct(Order.order_id)).label("orders"),
        )
        .join(OrderDetail, OrderDetail.order_id == Order.order_id)
        .outerjoin(Reservation, Reservation.reservation_id == Order.reservation_id)
        .filter(Order.status == "Completed")
        .group_by("day", "order_type")
        .order_by(desc("day"), "order_type")
        .all()
    )
    data = [
        RevenueByDay(
            day=r.day,
            order_type=r.order_type,
            revenue=to_money(r.revenue or 0),
            orders=r.orders,
        )
        for r in rows
    ]
    return ListResponse(count=len(data), data=data)


# ---------------------------------------------------------------------------
# GET /api/reports/popular-items
# ---------------------------------------------------------------------------


@router.get("/popular-items", response_model=ListResponse[PopularItem])
def popular_items(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    order_count = func.count(OrderDetail.order_detail_id)
    rows = (
        db.query(
            MenuItem.item_name.label("item"),
            order_count.label("orders"),
            func.sum(OrderDetail.quantity).label("total_quantity"),
        )
        .join(OrderDetail, OrderDetail.item_id == MenuItem.item_id)
        .group_by(MenuItem.item_id, MenuItem.item_name)
        .order_by(order_count.desc(), MenuItem.item_name)
        .all()
    )
    data = [
        PopularItem(item=r.item, orders=r.orders, total_quantity=r.total_quantity or 0)
        for r in rows
    ]
    return ListResponse(count=len(data), data=data)


# ---------------------------------------------------------------------------
# GET /api/reports/busiest-times
# ---------------------------------------------------------------------------


@router.get("/busiest-times", response_model=ListResponse[BusiestTime])
def busiest_times(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    slot = case(
        *[
            (Reservation.start_time.between(first, last), label)
            for label, first, last in TIME_SLOTS
        ],
        else_=OTHER_SLOT,
    )
    reservation_count = func.count(Reservation.reservation_id)
    rows = (
        db.query(slot.label("time_slot"), reservation_count.label("reservations"))
        .group_by("time_slot")
        .order_by(desc("reservations"), "time_slot")
        .all()
    )
    data = [BusiestTime(time_slot=r.time_slot, reservations=r.reservations) for r in rows]
    return ListResponse(count=len(data), data=data)
