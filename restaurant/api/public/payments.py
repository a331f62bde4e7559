import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_user
from restaurant.core.permissions import ensure_authorized
from restaurant.models.order import Order
from restaurant.models.payment import Payment
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, ListResponse
from restaurant.schemas.payment import (
    CustomerPayment,
    Payment as PaymentSchema,
    PaymentCreatedResponse,
    PayPaymentCreate,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Payments"])

DEFAULT_PAYMENT_METHOD = "Credit Card"


def serialize_payment(payment: Payment) -> PaymentSchema:
    return PaymentSchema(
        payment_id=payment.payment_id,
        order_id=payment.order_id,
        user_id=payment.user_id,
        user_name=payment.user.name if payment.user else None,
        amount=payment.amount,
        payment_method=payment.payment_method,
        status=payment.status,
        payment_date=payment.payment_date,
    )


def _customer_payments(db: Session, customer_id: int, payment_status: str) -> ListResponse[CustomerPayment]:
    payments = (
        db.query(Payment)
        .options(joinedload(Payment.user), joinedload(Payment.order))
        .filter(Payment.user_id == customer_id, Payment.status == payment_status)
        .order_by(Payment.payment_date.desc(), Payment.payment_id.desc())
        .all()
    )
    rows = [
        CustomerPayment(
            payment_id=p.payment_id,
            order_id=p.order_id,
            order_status=p.order.status if p.order else None,
            amount=p.amount,
            payment_method=p.payment_method,
            payment_status=p.status,
            customer_id=p.user_id,
            customer_name=p.user.name if p.user else None,
            customer_email=p.user.email if p.user else None,
            payment_date=p.payment_date,
        )
        for p in payments
    ]
    return ListResponse(count=len(rows), data=rows)


# ---------------------------------------------------------------------------
# POST /PayPayments: record a pending payment for an order
# ---------------------------------------------------------------------------


@router.post("/PayPayments", response_model=PaymentCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_customer_payment(
    data: PayPaymentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_authorized(current_user, owner_id=data.user_id)

    if not db.query(Order.order_id).filter(Order.order_id == data.order_id).first():
        raise HTTPException(status_code=404, detail="Order not found")
    if not db.query(User.user_id).filter(User.user_id == data.user_id).first():
        raise HTTPException(status_code=404, detail="User not found")

    payment = Payment(
        order_id=data.order_id,
        user_id=data.user_id,
        amount=data.amount,
        payment_method=DEFAULT_PAYMENT_METHOD,
        status="Pending",
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    return PaymentCreatedResponse(message="Payment created successfully", payment=serialize_payment(payment))


# ---------------------------------------------------------------------------
# POST /api/payments/{id}/complete
# ---------------------------------------------------------------------------


@router.post("/api/payments/{payment_id}/complete", response_model=DataResponse[PaymentSchema])
def complete_payment(
    payment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Settle a pending payment; its order is marked Completed in the same transaction."""
    payment = (
        db.query(Payment)
        .options(joinedload(Payment.order))
        .filter(Payment.payment_id == payment_id)
        .first()
    )
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    owner_id = payment.user_id if payment.user_id is not None else (payment.order.user_id if payment.order else None)
    ensure_authorized(current_user, owner_id=owner_id)

    if payment.status != "Pending":
        raise HTTPException(status_code=400, detail=f"Payment status is already {payment.status}")

    payment.status = "Completed"
    payment.payment_date = datetime.now(timezone.utc)
    if payment.order:
        payment.order.status = "Completed"
    db.commit()
    db.refresh(payment)

    logger.info("Payment %s completed for order %s", payment.payment_id, payment.order_id)
    return DataResponse(message="Payment successfully completed", data=serialize_payment(payment))


# ---------------------------------------------------------------------------
# Customer payment history
# ---------------------------------------------------------------------------


@router.get("/payments/customer/{customer_id}", response_model=ListResponse[CustomerPayment])
def list_completed_payments(
    customer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_authorized(current_user, owner_id=customer_id)
    return _customer_payments(db, customer_id, "Completed")


@router.get("/PendingPayments/customer/{customer_id}", response_model=ListResponse[CustomerPayment])
def list_pending_payments(
    customer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_authorized(current_user, owner_id=customer_id)
    return _customer_payments(db, customer_id, "Pending")
