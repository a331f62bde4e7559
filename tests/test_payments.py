from decimal import Decimal

from conftest import auth_header, make_user
from restaurant.models.order import Order
from restaurant.models.payment import Payment


def _order(db, user, status="Pending"):
    order = Order(user_id=user.user_id, status=status)
    db.add(order)
    db.commit()
    db.refresh(order)
    return order


def test_pay_payment_creates_pending_payment(client, db_session, customer):
    order = _order(db_session, customer)
    res = client.post(
        "/PayPayments",
        json={"OrderID": order.order_id, "UserID": customer.user_id, "Amount": "25.00"},
        headers=auth_header(customer),
    )
    assert res.status_code == 201
    payment = res.json()["payment"]
    assert payment["PaymentMethod"] == "Credit Card"
    assert payment["Status"] == "Pending"
    assert Decimal(str(payment["Amount"])) == Decimal("25.00")


def test_pay_payment_rejects_non_positive_amount(client, db_session, customer):
    order = _order(db_session, customer)
    res = client.post(
        "/PayPayments",
        json={"OrderID": order.order_id, "UserID": customer.user_id, "Amount": "0"},
        headers=auth_header(customer),
    )
    assert res.status_code == 400


def test_pay_payment_unknown_order(client, customer):
    res = client.post(
        "/PayPayments",
        json={"OrderID": 999, "UserID": customer.user_id, "Amount": "5.00"},
        headers=auth_header(customer),
    )
    assert res.status_code == 404


def test_complete_payment_marks_order_completed(client, db_session, customer):
    order = _order(db_session, customer)
    created = client.post(
        "/PayPayments",
        json={"OrderID": order.order_id, "UserID": customer.user_id, "Amount": "25.00"},
        headers=auth_header(customer),
    )
    payment_id = created.json()["payment"]["PaymentID"]

    res = client.post(f"/api/payments/{payment_id}/complete", headers=auth_header(customer))
    assert res.status_code == 200
    assert res.json()["data"]["Status"] == "Completed"

    db_session.expire_all()
    assert db_session.query(Order).filter(Order.order_id == order.order_id).one().status == "Completed"

    again = client.post(f"/api/payments/{payment_id}/complete", headers=auth_header(customer))
    assert again.status_code == 400


def test_complete_unknown_payment(client, customer):
    res = client.post("/api/payments/999/complete", headers=auth_header(customer))
    assert res.status_code == 404


def test_customer_payment_history(client, db_session, customer):
    done = _order(db_session, customer, status="Completed")
    open_ = _order(db_session, customer)
    db_session.add_all([
        Payment(order_id=done.order_id, user_id=customer.user_id, amount=Decimal("10.00"), status="Completed"),
        Payment(order_id=open_.order_id, user_id=customer.user_id, amount=Decimal("4.50"), status="Pending"),
    ])
    db_session.commit()

    completed = client.get(f"/payments/customer/{customer.user_id}", headers=auth_header(customer)).json()
    assert completed["count"] == 1
    assert completed["data"][0]["OrderStatus"] == "Completed"
    assert completed["data"][0]["CustomerEmail"] == "alice@example.com"

    pending = client.get(f"/PendingPayments/customer/{customer.user_id}", headers=auth_header(customer)).json()
    assert pending["count"] == 1
    assert Decimal(str(pending["data"][0]["Amount"])) == Decimal("4.50")


def test_payment_history_of_other_customer_forbidden(client, db_session, customer):
    other = make_user(db_session, "carol@example.com", name="Carol")
    res = client.get(f"/payments/customer/{other.user_id}", headers=auth_header(customer))
    assert res.status_code == 403


def test_admin_payment_crud(client, db_session, customer, admin):
    order = _order(db_session, customer)
    created = client.post(
        "/payments",
        json={"OrderID": order.order_id, "Amount": "12.00", "PaymentMethod": "Cash"},
        headers=auth_header(admin),
    )
    assert created.status_code == 201
    data = created.json()["data"]
    assert data["UserID"] == customer.user_id
    assert data["Status"] == "Pending"

    listed = client.get("/payments", headers=auth_header(admin)).json()
    assert listed["count"] == 1

    deleted = client.delete(f"/payments/{data['PaymentID']}", headers=auth_header(admin))
    assert deleted.status_code == 200
    assert client.delete(f"/payments/{data['PaymentID']}", headers=auth_header(admin)).status_code == 404


def test_admin_payment_routes_forbidden_for_customers(client, customer):
    assert client.get("/payments", headers=auth_header(customer)).status_code == 403
