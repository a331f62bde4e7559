from decimal import Decimal
from typing import Optional
from pydantic import Field

from restaurant.schemas.common import APIModel


class MenuItemCreate(APIModel):
    item_name: str = Field(min_length=1, max_length=100, alias="ItemName")
    category: Optional[str] = Field(None, max_length=50, alias="Category")
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2, alias="Price")


class MenuItemPriceUpdate(APIModel):
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2, alias="Price")


class MenuItem(APIModel):
    item_id: int = Field(alias="ItemID")
    item_name: str = Field(alias="ItemName")
    category: Optional[str] = Field(None, alias="Category")
    price: Decimal = Field(alias="Price")
