from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_admin_user
from restaurant.api.public.payments import serialize_payment
from restaurant.models.order import Order
from restaurant.models.payment import Payment
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, ListResponse, MessageResponse
from restaurant.schemas.payment import Payment as PaymentSchema, PaymentCreate

router = APIRouter(prefix="/payments", tags=["Admin - Payments"])


@router.get("", response_model=ListResponse[PaymentSchema])
def list_payments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    payments = (
        db.query(Payment)
        .options(joinedload(Payment.user))
        .order_by(Payment.payment_id.desc())
        .all()
    )
    return ListResponse(count=len(payments), data=[serialize_payment(p) for p in payments])


@router.post("", response_model=DataResponse[PaymentSchema], status_code=status.HTTP_201_CREATED)
def create_payment(
    data: PaymentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Record a payment against an order; it is attributed to the order's owner."""
    order = db.query(Order).filter(Order.order_id == data.order_id).first()
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    payment = Payment(
        order_id=order.order_id,
        user_id=order.user_id,
        amount=data.amount,
        payment_method=data.payment_method,
        status=data.status,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    return DataResponse(message="Payment created successfully", data=serialize_payment(payment))


@router.delete("/{payment_id}", response_model=MessageResponse)
def delete_payment(
    payment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    payment = db.query(Payment).filter(Payment.payment_id == payment_id).first()
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    db.delete(payment)
    db.commit()
    return MessageResponse(message="Payment deleted successfully")
