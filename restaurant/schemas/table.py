from datetime import date
from typing import Optional
from pydantic import Field

from restaurant.schemas.common import APIModel


class TableTypeCreate(APIModel):
    type: str = Field(min_length=1, max_length=50, alias="Type")


class TableType(APIModel):
    table_type_id: int = Field(alias="TableTypeID")
    type: str = Field(alias="Type")


class TableCreate(APIModel):
    table_type_id: int = Field(alias="TableTypeID")
    location: Optional[str] = Field(None, max_length=100, alias="Location")
    capacity: int = Field(ge=1, alias="Capacity")


class Table(APIModel):
    table_id: int = Field(alias="TableID")
    table_type_id: int = Field(alias="TableTypeID")
    location: Optional[str] = Field(None, alias="Location")
    capacity: int = Field(alias="Capacity")
    table_type: Optional[str] = Field(None, alias="TableType")


# POST /available-tables
class AvailabilityRequest(APIModel):
    on_date: date = Field(alias="date")
    start_time: int = Field(alias="startTime")
    end_time: int = Field(alias="endTime")
    capacity: int = Field(ge=1)


class AvailableTable(APIModel):
    table_id: int = Field(alias="TableID")
    location: Optional[str] = Field(None, alias="Location")
    capacity: int = Field(alias="Capacity")
    type: Optional[str] = Field(None, alias="Type")
