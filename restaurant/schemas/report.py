from decimal import Decimal
from datetime import date
from pydantic import Field

from restaurant.schemas.common import APIModel


class RevenueByDay(APIModel):
    day: date = Field(alias="Date")
    revenue: Decimal = Field(alias="Revenue")
    orders: int = Field(alias="Orders")
    order_type: str = Field(alias="OrderType")  # "Reservation" | "Walk-in"


class PopularItem(APIModel):
    item: str = Field(alias="Item")
    orders: int = Field(alias="Orders")
    total_quantity: int = Field(alias="TotalQuantity")


class BusiestTime(APIModel):
    time_slot: str = Field(alias="TimeSlot")
    reservations: int = Field(alias="Reservations")
