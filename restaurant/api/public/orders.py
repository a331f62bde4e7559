import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_user
from restaurant.core.permissions import ensure_authorized
from restaurant.models.menu import MenuItem
from restaurant.models.order import Order, OrderDetail
from restaurant.models.payment import Payment
from restaurant.models.reservation import Reservation
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse
from restaurant.schemas.order import (
    CheckoutRequest,
    CheckoutResult,
    Order as OrderSchema,
    OrderByIDCreate,
    OrderCreate,
    OrderCreatedResponse,
    OrderDetailCreate,
    PricedOrderDetail,
)
from restaurant.utils.pricing import LinePrice, price_line, summarize_lines

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Orders"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def serialize_order(order: Order) -> OrderSchema:
    return OrderSchema(
        order_id=order.order_id,
        user_id=order.user_id,
        user_name=order.user.name if order.user else None,
        reservation_id=order.reservation_id,
        status=order.status,
        order_date=order.order_date,
    )


def serialize_priced_detail(detail: OrderDetail, item: MenuItem, price: LinePrice) -> PricedOrderDetail:
    return PricedOrderDetail(
        order_detail_id=detail.order_detail_id,
        order_id=detail.order_id,
        item_id=detail.item_id,
        item_name=item.item_name,
        quantity=detail.quantity,
        price=detail.price,
        base_price=price.base_price,
        discount_applied=price.discount_applied,
        is_member=price.is_member,
        final_price=price.final_price,
    )


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _check_reservation(db: Session, reservation_id, user_id: int) -> None:
    if reservation_id is None:
        return
    reservation = db.query(Reservation).filter(Reservation.reservation_id == reservation_id).first()
    if not reservation:
        raise HTTPException(status_code=404, detail="Reservation not found")
    if reservation.user_id != user_id:
        raise HTTPException(status_code=400, detail="Reservation belongs to a different user")


# ---------------------------------------------------------------------------
# Order creation
# ---------------------------------------------------------------------------


@router.post("/orderByID", response_model=OrderCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_order_for_user(
    data: OrderByIDCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Open an empty Pending order; the client then adds lines via /order-details."""
    ensure_authorized(current_user, owner_id=data.user_id)
    _get_user_or_404(db, data.user_id)

    order = Order(user_id=data.user_id, status="Pending")
    db.add(order)
    db.commit()
    return OrderCreatedResponse(order_id=order.order_id, message="Order created successfully")


@router.post("/orders", response_model=DataResponse[OrderSchema], status_code=status.HTTP_201_CREATED)
def create_order(
    data: OrderCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_authorized(current_user, owner_id=data.user_id)
    _get_user_or_404(db, data.user_id)
    _check_reservation(db, data.reservation_id, data.user_id)

    order = Order(user_id=data.user_id, reservation_id=data.reservation_id, status=data.status)
    db.add(order)
    db.commit()
    db.refresh(order)
    return DataResponse(message="Order created successfully", data=serialize_order(order))


# ---------------------------------------------------------------------------
# POST /order-details: price one line and store it
# ---------------------------------------------------------------------------


@router.post("/order-details", response_model=DataResponse[PricedOrderDetail], status_code=status.HTTP_201_CREATED)
def create_order_detail(
    data: OrderDetailCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Add one line to an order.

    The stored `Price` is the final per-unit price: members of the order's
    owner get the member discount taken off the menu price. `basePrice`,
    `discountApplied`, `isMember` and `finalPrice` are returned for display.
    """
    order = (
        db.query(Order)
        .options(joinedload(Order.user))
        .filter(Order.order_id == data.order_id)
        .first()
    )
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    ensure_authorized(current_user, owner_id=order.user_id)

    item = db.query(MenuItem).filter(MenuItem.item_id == data.item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")

    price = price_line(item.price, bool(order.user.is_member))
    detail = OrderDetail(
        order_id=order.order_id,
        item_id=item.item_id,
        quantity=data.quantity,
        price=price.final_price,
    )
    db.add(detail)
    db.commit()
    db.refresh(detail)

    return DataResponse(
        message="Order detail created successfully",
        data=serialize_priced_detail(detail, item, price),
    )


# ---------------------------------------------------------------------------
# POST /orders/checkout: order + details + payment, all or nothing
# ---------------------------------------------------------------------------


@router.post("/orders/checkout", response_model=DataResponse[CheckoutResult], status_code=status.HTTP_201_CREATED)
def checkout(
    data: CheckoutRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Place a complete order in one transaction.

    Creates the order, one priced detail per item and a Pending payment for
    the discounted total. Nothing is written unless every step succeeds.
    """
    ensure_authorized(current_user, owner_id=data.user_id)
    user = _get_user_or_404(db, data.user_id)
    _check_reservation(db, data.reservation_id, data.user_id)

    item_ids = {entry.item_id for entry in data.items}
    items = {
        item.item_id: item
        for item in db.query(MenuItem).filter(MenuItem.item_id.in_(item_ids)).all()
    }
    missing = sorted(item_ids - items.keys())
    if missing:
        raise HTTPException(
            status_code=404,
            detail=f"Item not found: {', '.join(str(i) for i in missing)}",
        )

    order = Order(user_id=user.user_id, reservation_id=data.reservation_id, status="Pending")
    db.add(order)
    db.flush()  # get order.order_id

    lines = []
    for entry in data.items:
        item = items[entry.item_id]
        price = price_line(item.price, bool(user.is_member))
        detail = OrderDetail(
            order_id=order.order_id,
            item_id=item.item_id,
            quantity=entry.quantity,
            price=price.final_price,
        )
        db.add(detail)
        lines.append((detail, item, price, entry.quantity))
    db.flush()

    totals = summarize_lines((price, quantity) for _, _, price, quantity in lines)
    payment = Payment(
        order_id=order.order_id,
        user_id=user.user_id,
        amount=totals.total,
        payment_method=data.payment_method,
        status="Pending",
    )
    db.add(payment)
    db.commit()

    logger.info(
        "Order %s checked out for user %s: %d line(s), total %s",
        order.order_id, user.user_id, len(lines), totals.total,
    )
    return DataResponse(
        message="Order placed successfully",
        data=CheckoutResult(
            order_id=order.order_id,
            payment_id=payment.payment_id,
            is_member=bool(user.is_member),
            subtotal=totals.subtotal,
            discount_applied=totals.discount_applied,
            total=totals.total,
            items=[serialize_priced_detail(d, i, p) for d, i, p, _ in lines],
        ),
    )
