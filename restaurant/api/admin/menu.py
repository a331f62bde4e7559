from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_admin_user
from restaurant.api.public.menu import serialize_menu_item
from restaurant.models.menu import MenuItem
from restaurant.models.order import OrderDetail
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, MessageResponse
from restaurant.schemas.menu import MenuItem as MenuItemSchema, MenuItemCreate, MenuItemPriceUpdate

router = APIRouter(prefix="/api/menu", tags=["Admin - Menu"])

DEFAULT_CATEGORY = "Other"


def _get_item_or_404(db: Session, item_id: int) -> MenuItem:
    item = db.query(MenuItem).filter(MenuItem.item_id == item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


@router.post("", response_model=DataResponse[MenuItemSchema], status_code=status.HTTP_201_CREATED)
def create_menu_item(
    data: MenuItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    item = MenuItem(
        item_name=data.item_name,
        category=data.category or DEFAULT_CATEGORY,
        price=data.price,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return DataResponse(message="Item added successfully", data=serialize_menu_item(item))


@router.put("/{item_id}", response_model=DataResponse[MenuItemSchema])
def update_menu_price(
    item_id: int,
    data: MenuItemPriceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Change the base price. Lines already ordered keep the price they were sold at."""
    item = _get_item_or_404(db, item_id)
    item.price = data.price
    db.commit()
    db.refresh(item)
    return DataResponse(message="Price updated successfully", data=serialize_menu_item(item))


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_menu_item(
    item_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    item = _get_item_or_404(db, item_id)
    if db.query(OrderDetail.order_detail_id).filter(OrderDetail.item_id == item_id).first():
        raise HTTPException(status_code=400, detail="Cannot delete menu item that has been ordered")
    db.delete(item)
    db.commit()
    return MessageResponse(message="Item deleted successfully")
