from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_admin_user
from restaurant.api.public.orders import serialize_order
from restaurant.models.order import Order, OrderDetail
from restaurant.models.payment import Payment
from restaurant.models.user import User
from restaurant.schemas.common import ListResponse, MessageResponse
from restaurant.schemas.order import Order as OrderSchema, OrderDetail as OrderDetailSchema

router = APIRouter(tags=["Admin - Orders"])


@router.get("/orders", response_model=ListResponse[OrderSchema])
def list_orders(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    orders = (
        db.query(Order)
        .options(joinedload(Order.user))
        .order_by(Order.order_id.desc())
        .all()
    )
    return ListResponse(count=len(orders), data=[serialize_order(o) for o in orders])


@router.delete("/orders/{order_id}", response_model=MessageResponse)
def delete_order(
    order_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    order = db.query(Order).filter(Order.order_id == order_id).first()
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    has_details = db.query(OrderDetail.order_detail_id).filter(OrderDetail.order_id == order_id).first()
    has_payments = db.query(Payment.payment_id).filter(Payment.order_id == order_id).first()
    if has_details or has_payments:
        raise HTTPException(
            status_code=400,
            detail="Cannot delete order with existing order details or payments",
        )

    db.delete(order)
    db.commit()
    return MessageResponse(message="Order deleted successfully")


@router.get("/order-details", response_model=ListResponse[OrderDetailSchema])
def list_order_details(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    details = (
        db.query(OrderDetail)
        .options(joinedload(OrderDetail.item))
        .order_by(OrderDetail.order_detail_id)
        .all()
    )
    return ListResponse(
        count=len(details),
        data=[
            OrderDetailSchema(
                order_detail_id=d.order_detail_id,
                order_id=d.order_id,
                item_id=d.item_id,
                item_name=d.item.item_name if d.item else None,
                quantity=d.quantity,
                price=d.price,
            )
            for d in details
        ],
    )


@router.delete("/order-details/{order_detail_id}", response_model=MessageResponse)
def delete_order_detail(
    order_detail_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    detail = db.query(OrderDetail).filter(OrderDetail.order_detail_id == order_detail_id).first()
    if not detail:
        raise HTTPException(status_code=404, detail="Order detail not found")
    db.delete(detail)
    db.commit()
    return MessageResponse(message="Order detail deleted successfully")
