from datetime import date
from typing import Literal, Optional
from pydantic import Field

from restaurant.models.reservation import ReservationStatus
from restaurant.schemas.common import APIModel


# POST /reservations
class ReservationCreate(APIModel):
    user_id: int = Field(alias="UserID")
    table_id: int = Field(alias="TableID")
    on_date: date = Field(alias="Date")
    start_time: int = Field(alias="StartTime")
    end_time: int = Field(alias="EndTime")
    people: int = Field(ge=1, alias="People")


# PUT /reservation/{id}/status: any known status may follow any other
class ReservationStatusUpdate(APIModel):
    status: ReservationStatus


# PUT /reservations/{id}: the owner may only cancel
class ReservationCancel(APIModel):
    status: Literal["Cancelled"] = Field(alias="Status")


class Reservation(APIModel):
    reservation_id: int = Field(alias="ReservationID")
    user_id: int = Field(alias="UserID")
    user_name: Optional[str] = Field(None, alias="UserName")
    table_id: int = Field(alias="TableID")
    table_location: Optional[str] = Field(None, alias="TableLocation")
    table_capacity: Optional[int] = Field(None, alias="TableCapacity")
    on_date: date = Field(alias="Date")
    start_time: int = Field(alias="StartTime")
    end_time: int = Field(alias="EndTime")
    people: int = Field(alias="People")
    status: str = Field(alias="Status")
    satisfaction_rating: Optional[int] = Field(None, alias="SatisfactionRating")
