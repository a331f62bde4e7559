from decimal import Decimal
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field

from restaurant.schemas.common import APIModel


# POST /orders
class OrderCreate(APIModel):
    user_id: int = Field(alias="UserID")
    reservation_id: Optional[int] = Field(None, alias="ReservationID")
    status: Literal["Pending", "Completed"] = Field("Pending", alias="Status")


# POST /orderByID
class OrderByIDCreate(APIModel):
    user_id: int = Field(alias="userID")


class Order(APIModel):
    order_id: int = Field(alias="OrderID")
    user_id: int = Field(alias="UserID")
    user_name: Optional[str] = Field(None, alias="UserName")
    reservation_id: Optional[int] = Field(None, alias="ReservationID")
    status: str = Field(alias="Status")
    order_date: Optional[datetime] = Field(None, alias="OrderDate")


class OrderCreatedResponse(APIModel):
    success: bool = True
    order_id: int = Field(alias="orderId")
    message: str


# POST /order-details
class OrderDetailCreate(APIModel):
    order_id: int = Field(alias="OrderID")
    item_id: int = Field(alias="ItemID")
    quantity: int = Field(ge=1, alias="Quantity")


class OrderDetail(APIModel):
    order_detail_id: int = Field(alias="OrderDetailID")
    order_id: int = Field(alias="OrderID")
    item_id: int = Field(alias="ItemID")
    item_name: Optional[str] = Field(None, alias="ItemName")
    quantity: int = Field(alias="Quantity")
    price: Decimal = Field(alias="Price")


# The stored row plus how its price was derived (informational only)
class PricedOrderDetail(OrderDetail):
    base_price: Decimal = Field(alias="basePrice")
    discount_applied: Decimal = Field(alias="discountApplied")
    is_member: bool = Field(alias="isMember")
    final_price: Decimal = Field(alias="finalPrice")


# POST /orders/checkout: order, details and payment in one transaction
class CheckoutItem(APIModel):
    item_id: int = Field(alias="ItemID")
    quantity: int = Field(ge=1, alias="Quantity")


class CheckoutRequest(APIModel):
    user_id: int = Field(alias="UserID")
    reservation_id: Optional[int] = Field(None, alias="ReservationID")
    payment_method: str = Field("Credit Card", min_length=1, max_length=50, alias="PaymentMethod")
    items: List[CheckoutItem] = Field(min_length=1)


class CheckoutResult(APIModel):
    order_id: int = Field(alias="OrderID")
    payment_id: int = Field(alias="PaymentID")
    is_member: bool = Field(alias="isMember")
    subtotal: Decimal
    discount_applied: Decimal = Field(alias="discountApplied")
    total: Decimal
    items: List[PricedOrderDetail]
