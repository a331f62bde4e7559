from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restaurant.db.session import get_db
from restaurant.models.menu import MenuItem
from restaurant.models.staff import Staff
from restaurant.schemas.common import ListResponse
from restaurant.schemas.menu import MenuItem as MenuItemSchema
from restaurant.schemas.staff import Staff as StaffSchema

router = APIRouter(tags=["Menu"])


def serialize_menu_item(item: MenuItem) -> MenuItemSchema:
    return MenuItemSchema(
        item_id=item.item_id,
        item_name=item.item_name,
        category=item.category,
        price=item.price,
    )


def serialize_staff(member: Staff) -> StaffSchema:
    return StaffSchema(
        staff_id=member.staff_id,
        name=member.name,
        role=member.role,
        contact_info=member.contact_info,
    )


@router.get("/api/menu", response_model=ListResponse[MenuItemSchema])
@router.get("/menu", response_model=ListResponse[MenuItemSchema])
def list_menu(db: Session = Depends(get_db)):
    """Every menu item at its base (non-discounted) price."""
    items = db.query(MenuItem).order_by(MenuItem.category, MenuItem.item_name).all()
    return ListResponse(count=len(items), data=[serialize_menu_item(i) for i in items])


@router.get("/api/chefs", response_model=ListResponse[StaffSchema])
def list_chefs(db: Session = Depends(get_db)):
    chefs = db.query(Staff).filter(Staff.role == "Chef").order_by(Staff.name).all()
    return ListResponse(count=len(chefs), data=[serialize_staff(c) for c in chefs])
