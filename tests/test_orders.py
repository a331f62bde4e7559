from decimal import Decimal

from conftest import auth_header, future_day, make_user
from restaurant.models.menu import MenuItem
from restaurant.models.order import Order, OrderDetail
from restaurant.models.payment import Payment
from restaurant.models.reservation import Reservation
from restaurant.utils.pricing import line_total


def _money(value):
    return Decimal(str(value))


def _open_order(client, user):
    res = client.post("/orderByID", json={"userID": user.user_id}, headers=auth_header(user))
    assert res.status_code == 201
    return res.json()["orderId"]


def test_order_by_id_creates_pending_order(client, db_session, customer):
    order_id = _open_order(client, customer)
    order = db_session.query(Order).filter(Order.order_id == order_id).one()
    assert order.status == "Pending"
    assert order.user_id == customer.user_id


def test_create_order_with_reservation_of_other_user(client, db_session, customer, tables):
    other = make_user(db_session, "carol@example.com", name="Carol")
    reservation = Reservation(
        user_id=other.user_id, table_id=tables[0].table_id, date=future_day(),
        start_time=18, end_time=20, people=2,
    )
    db_session.add(reservation)
    db_session.commit()

    res = client.post(
        "/orders",
        json={"UserID": customer.user_id, "ReservationID": reservation.reservation_id},
        headers=auth_header(customer),
    )
    assert res.status_code == 400


def test_non_member_detail_keeps_menu_price(client, db_session, customer, menu_items):
    order_id = _open_order(client, customer)
    res = client.post(
        "/order-details",
        json={"OrderID": order_id, "ItemID": menu_items[0].item_id, "Quantity": 2},
        headers=auth_header(customer),
    )
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["isMember"] is False
    assert _money(data["Price"]) == Decimal("12.50")
    assert _money(data["discountApplied"]) == Decimal("0")
    assert data["ItemName"] == "Margherita"


def test_member_detail_stores_discounted_price(client, db_session, member, menu_items):
    order_id = _open_order(client, member)
    res = client.post(
        "/order-details",
        json={"OrderID": order_id, "ItemID": menu_items[0].item_id, "Quantity": 1},
        headers=auth_header(member),
    )
    data = res.json()["data"]
    assert data["isMember"] is True
    assert _money(data["basePrice"]) == Decimal("12.50")
    assert _money(data["discountApplied"]) == Decimal("2.50")
    assert _money(data["finalPrice"]) == Decimal("10.00")

    stored = db_session.query(OrderDetail).one()
    assert stored.price == Decimal("10.00")


def test_detail_for_unknown_order_or_item(client, customer, menu_items):
    res = client.post(
        "/order-details",
        json={"OrderID": 999, "ItemID": menu_items[0].item_id, "Quantity": 1},
        headers=auth_header(customer),
    )
    assert res.status_code == 404

    order_id = _open_order(client, customer)
    res = client.post(
        "/order-details",
        json={"OrderID": order_id, "ItemID": 999, "Quantity": 1},
        headers=auth_header(customer),
    )
    assert res.status_code == 404


def test_detail_on_someone_elses_order_forbidden(client, db_session, customer, menu_items):
    other = make_user(db_session, "carol@example.com", name="Carol")
    order_id = _open_order(client, other)
    res = client.post(
        "/order-details",
        json={"OrderID": order_id, "ItemID": menu_items[0].item_id, "Quantity": 1},
        headers=auth_header(customer),
    )
    assert res.status_code == 403


def test_zero_quantity_rejected(client, customer, menu_items):
    order_id = _open_order(client, customer)
    res = client.post(
        "/order-details",
        json={"OrderID": order_id, "ItemID": menu_items[0].item_id, "Quantity": 0},
        headers=auth_header(customer),
    )
    assert res.status_code == 400


def test_price_change_does_not_touch_existing_details(client, db_session, customer, admin, menu_items):
    order_id = _open_order(client, customer)
    client.post(
        "/order-details",
        json={"OrderID": order_id, "ItemID": menu_items[0].item_id, "Quantity": 1},
        headers=auth_header(customer),
    )
    client.put(f"/api/menu/{menu_items[0].item_id}", json={"Price": "20.00"}, headers=auth_header(admin))

    assert db_session.query(OrderDetail).one().price == Decimal("12.50")


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------


def test_checkout_member(client, db_session, member, menu_items):
    res = client.post(
        "/orders/checkout",
        json={
            "UserID": member.user_id,
            "items": [
                {"ItemID": menu_items[0].item_id, "Quantity": 2},
                {"ItemID": menu_items[1].item_id, "Quantity": 1},
            ],
        },
        headers=auth_header(member),
    )
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["isMember"] is True
    assert _money(data["subtotal"]) == Decimal("32.99")
    assert _money(data["discountApplied"]) == Decimal("6.60")
    assert _money(data["total"]) == Decimal("26.39")
    assert len(data["items"]) == 2

    payment = db_session.query(Payment).one()
    assert payment.amount == Decimal("26.39")
    assert payment.status == "Pending"
    assert payment.order_id == data["OrderID"]
    assert db_session.query(OrderDetail).count() == 2


def test_checkout_non_member(client, customer, menu_items):
    res = client.post(
        "/orders/checkout",
        json={"UserID": customer.user_id, "items": [{"ItemID": menu_items[1].item_id, "Quantity": 3}]},
        headers=auth_header(customer),
    )
    data = res.json()["data"]
    assert _money(data["total"]) == Decimal("23.97")
    assert _money(data["discountApplied"]) == Decimal("0.00")


def test_checkout_is_all_or_nothing(client, db_session, customer, menu_items):
    res = client.post(
        "/orders/checkout",
        json={
            "UserID": customer.user_id,
            "items": [
                {"ItemID": menu_items[0].item_id, "Quantity": 1},
                {"ItemID": 999, "Quantity": 1},
            ],
        },
        headers=auth_header(customer),
    )
    assert res.status_code == 404
    assert db_session.query(Order).count() == 0
    assert db_session.query(OrderDetail).count() == 0
    assert db_session.query(Payment).count() == 0


def test_checkout_requires_items(client, customer):
    res = client.post(
        "/orders/checkout",
        json={"UserID": customer.user_id, "items": []},
        headers=auth_header(customer),
    )
    assert res.status_code == 400


def test_ten_dollar_item_times_three(client, db_session, customer, member):
    soup = MenuItem(item_name="Soup", category="Starter", price=Decimal("10.00"))
    db_session.add(soup)
    db_session.commit()
    db_session.refresh(soup)

    expected = {
        customer.user_id: (False, Decimal("10.00"), Decimal("0"), Decimal("30.00")),
        member.user_id: (True, Decimal("8.00"), Decimal("2.00"), Decimal("24.00")),
    }
    for user in (customer, member):
        is_member, final, discount, total = expected[user.user_id]
        order_id = _open_order(client, user)
        res = client.post(
            "/order-details",
            json={"OrderID": order_id, "ItemID": soup.item_id, "Quantity": 3},
            headers=auth_header(user),
        )
        data = res.json()["data"]
        assert data["isMember"] is is_member
        assert _money(data["basePrice"]) == Decimal("10.00")
        assert _money(data["finalPrice"]) == final
        assert _money(data["discountApplied"]) == discount
        assert line_total(_money(data["Price"]), data["Quantity"]) == total
