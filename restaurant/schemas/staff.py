from typing import Optional
from pydantic import Field

from restaurant.schemas.common import APIModel


class StaffCreate(APIModel):
    name: str = Field(min_length=1, max_length=100, alias="Name")
    role: str = Field(min_length=1, max_length=50, alias="Role")
    contact_info: Optional[str] = Field(None, max_length=100, alias="ContactInfo")


class Staff(StaffCreate):
    staff_id: int = Field(alias="StaffID")
