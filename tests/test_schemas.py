from decimal import Decimal

import pytest
from pydantic import ValidationError

from restaurant import schemas


def test_aliases_and_field_names_both_accepted():
    by_alias = schemas.ReservationCreate(
        UserID=1, TableID=2, Date="2030-01-01", StartTime=18, EndTime=20, People=2
    )
    by_name = schemas.ReservationCreate(
        user_id=1, table_id=2, on_date="2030-01-01", start_time=18, end_time=20, people=2
    )
    assert by_alias == by_name


def test_dump_uses_wire_names():
    item = schemas.MenuItem(item_id=1, item_name="Soup", category="Starter", price=Decimal("3.50"))
    assert item.model_dump(by_alias=True) == {
        "ItemID": 1,
        "ItemName": "Soup",
        "Category": "Starter",
        "Price": Decimal("3.50"),
    }


def test_user_create_validation():
    with pytest.raises(ValidationError):
        schemas.UserCreate(Name="Eve", Email="not-an-email", Password="longenough")
    with pytest.raises(ValidationError):
        schemas.UserCreate(Name="Eve", Email="eve@example.com", Password="short")


def test_user_schema_has_no_password_field():
    assert "password_hash" not in schemas.User.model_fields


def test_checkout_requires_at_least_one_item():
    with pytest.raises(ValidationError):
        schemas.CheckoutRequest(UserID=1, items=[])
    request = schemas.CheckoutRequest(UserID=1, items=[{"ItemID": 3, "Quantity": 2}])
    assert request.payment_method == "Credit Card"


def test_reservation_status_update_rejects_unknown_status():
    assert schemas.ReservationStatusUpdate(status="Cancelled").status.value == "Cancelled"
    with pytest.raises(ValidationError):
        schemas.ReservationStatusUpdate(status="Seated")
