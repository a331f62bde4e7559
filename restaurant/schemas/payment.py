from decimal import Decimal
from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from restaurant.schemas.common import APIModel


# POST /payments (admin)
class PaymentCreate(APIModel):
    order_id: int = Field(alias="OrderID")
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2, alias="Amount")
    payment_method: str = Field(min_length=1, max_length=50, alias="PaymentMethod")
    status: Literal["Pending", "Completed"] = Field("Pending", alias="Status")


# POST /PayPayments (customer checkout)
class PayPaymentCreate(APIModel):
    order_id: int = Field(alias="OrderID")
    user_id: int = Field(alias="UserID")
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2, alias="Amount")


class Payment(APIModel):
    payment_id: int = Field(alias="PaymentID")
    order_id: int = Field(alias="OrderID")
    user_id: Optional[int] = Field(None, alias="UserID")
    user_name: Optional[str] = Field(None, alias="UserName")
    amount: Decimal = Field(alias="Amount")
    payment_method: str = Field(alias="PaymentMethod")
    status: str = Field(alias="Status")
    payment_date: Optional[datetime] = Field(None, alias="PaymentDate")


class PaymentCreatedResponse(APIModel):
    success: bool = True
    message: str
    payment: Payment


# Customer payment history rows
class CustomerPayment(APIModel):
    payment_id: int = Field(alias="PaymentID")
    order_id: int = Field(alias="OrderID")
    order_status: Optional[str] = Field(None, alias="OrderStatus")
    amount: Decimal = Field(alias="Amount")
    payment_method: str = Field(alias="PaymentMethod")
    payment_status: str = Field(alias="PaymentStatus")
    customer_id: Optional[int] = Field(None, alias="CustomerID")
    customer_name: Optional[str] = Field(None, alias="CustomerName")
    customer_email: Optional[str] = Field(None, alias="CustomerEmail")
    payment_date: Optional[datetime] = Field(None, alias="PaymentDate")
