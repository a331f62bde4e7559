from conftest import auth_header, future_day, make_user
from restaurant.models.order import Order
from restaurant.models.reservation import Reservation


def _payload(user, table, start=18, end=20, people=2, day=None):
    return {
        "UserID": user.user_id,
        "TableID": table.table_id,
        "Date": (day or future_day()).isoformat(),
        "StartTime": start,
        "EndTime": end,
        "People": people,
    }


def test_create_reservation(client, customer, tables):
    res = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["UserID"] == customer.user_id
    assert data["TableID"] == tables[1].table_id
    assert data["Status"] == "Pending"
    assert data["UserName"] == "Alice"
    assert data["TableLocation"] == "Center"


def test_reservation_requires_auth(client, customer, tables):
    res = client.post("/reservations", json=_payload(customer, tables[1]))
    assert res.status_code == 401
    assert res.json()["success"] is False


def test_cannot_book_for_someone_else(client, db_session, customer, tables):
    other = make_user(db_session, "carol@example.com", name="Carol")
    res = client.post("/reservations", json=_payload(other, tables[1]), headers=auth_header(customer))
    assert res.status_code == 403


def test_admin_can_book_for_anyone(client, customer, admin, tables):
    res = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(admin))
    assert res.status_code == 201


def test_overlapping_reservation_conflicts(client, db_session, customer, tables):
    first = client.post("/reservations", json=_payload(customer, tables[1], 18, 20), headers=auth_header(customer))
    assert first.status_code == 201

    clash = client.post("/reservations", json=_payload(customer, tables[1], 19, 21), headers=auth_header(customer))
    assert clash.status_code == 409
    assert clash.json()["success"] is False
    assert db_session.query(Reservation).count() == 1


def test_back_to_back_reservations_allowed(client, customer, tables):
    first = client.post("/reservations", json=_payload(customer, tables[1], 18, 20), headers=auth_header(customer))
    second = client.post("/reservations", json=_payload(customer, tables[1], 20, 22), headers=auth_header(customer))
    assert first.status_code == 201
    assert second.status_code == 201


def test_cancelled_slot_stays_blocked(client, db_session, customer, admin, tables):
    first = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    reservation_id = first.json()["data"]["ReservationID"]
    client.put(
        f"/reservation/{reservation_id}/status",
        json={"status": "Cancelled"},
        headers=auth_header(admin),
    )

    again = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    assert again.status_code == 409


def test_deleted_slot_can_be_rebooked(client, customer, tables):
    first = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    reservation_id = first.json()["data"]["ReservationID"]
    client.delete(f"/reservation/{reservation_id}", headers=auth_header(customer))

    again = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    assert again.status_code == 201


def test_party_larger_than_table_rejected(client, customer, tables):
    res = client.post("/reservations", json=_payload(customer, tables[0], people=5), headers=auth_header(customer))
    assert res.status_code == 400


def test_unknown_table(client, customer, tables):
    payload = _payload(customer, tables[0])
    payload["TableID"] = 999
    res = client.post("/reservations", json=payload, headers=auth_header(customer))
    assert res.status_code == 404


def test_bad_window_rejected(client, customer, tables):
    res = client.post("/reservations", json=_payload(customer, tables[1], 20, 18), headers=auth_header(customer))
    assert res.status_code == 400


def test_list_and_get_own_reservations(client, customer, tables):
    client.post("/reservations", json=_payload(customer, tables[1], 12, 14), headers=auth_header(customer))
    client.post("/reservations", json=_payload(customer, tables[2], 18, 20, day=future_day(3)), headers=auth_header(customer))

    res = client.get(f"/reservationsByUserId/{customer.user_id}", headers=auth_header(customer))
    assert res.status_code == 200
    body = res.json()
    assert body["count"] == 2
    # most recent date first
    assert body["data"][0]["Date"] == future_day(3).isoformat()

    reservation_id = body["data"][1]["ReservationID"]
    one = client.get(f"/reservations/{reservation_id}", headers=auth_header(customer))
    assert one.json()["data"]["StartTime"] == 12


def test_other_users_reservations_forbidden(client, db_session, customer, tables):
    other = make_user(db_session, "carol@example.com", name="Carol")
    res = client.get(f"/reservationsByUserId/{other.user_id}", headers=auth_header(customer))
    assert res.status_code == 403


def test_delete_reservation(client, db_session, customer, tables):
    created = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    reservation_id = created.json()["data"]["ReservationID"]

    res = client.delete(f"/reservation/{reservation_id}", headers=auth_header(customer))
    assert res.status_code == 200
    assert res.json()["success"] is True
    assert client.get(f"/reservations/{reservation_id}", headers=auth_header(customer)).status_code == 404


def test_delete_reservation_with_orders_rejected(client, db_session, customer, tables):
    created = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    reservation_id = created.json()["data"]["ReservationID"]
    db_session.add(Order(user_id=customer.user_id, reservation_id=reservation_id))
    db_session.commit()

    res = client.delete(f"/reservation/{reservation_id}", headers=auth_header(customer))
    assert res.status_code == 400


def test_admin_lists_and_filters_reservations(client, customer, admin, tables):
    client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    client.post("/reservations", json=_payload(customer, tables[2]), headers=auth_header(customer))

    res = client.get("/reservations", params={"tableID": tables[2].table_id}, headers=auth_header(admin))
    assert res.status_code == 200
    assert res.json()["count"] == 1

    assert client.get("/reservations", headers=auth_header(customer)).status_code == 403


def test_admin_updates_status(client, customer, admin, tables):
    created = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    reservation_id = created.json()["data"]["ReservationID"]

    res = client.put(
        f"/reservation/{reservation_id}/status",
        json={"status": "Confirmed"},
        headers=auth_header(admin),
    )
    assert res.status_code == 200
    assert res.json()["data"]["Status"] == "Confirmed"

    bad = client.put(
        f"/reservation/{reservation_id}/status",
        json={"status": "Seated"},
        headers=auth_header(admin),
    )
    assert bad.status_code == 400


def test_owner_cancels_reservation(client, db_session, customer, tables):
    created = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    reservation_id = created.json()["data"]["ReservationID"]

    res = client.put(
        f"/reservations/{reservation_id}",
        json={"Status": "Cancelled"},
        headers=auth_header(customer),
    )
    assert res.status_code == 200
    assert res.json()["data"]["Status"] == "Cancelled"

    db_session.expire_all()
    assert db_session.query(Reservation).one().status == "Cancelled"


def test_cancel_only_accepts_cancelled(client, customer, tables):
    created = client.post("/reservations", json=_payload(customer, tables[1]), headers=auth_header(customer))
    reservation_id = created.json()["data"]["ReservationID"]

    res = client.put(
        f"/reservations/{reservation_id}",
        json={"Status": "Confirmed"},
        headers=auth_header(customer),
    )
    assert res.status_code == 400


def test_cancel_someone_elses_reservation(client, db_session, customer, admin, tables):
    other = make_user(db_session, "carol@example.com", name="Carol")
    created = client.post("/reservations", json=_payload(other, tables[1]), headers=auth_header(other))
    reservation_id = created.json()["data"]["ReservationID"]

    forbidden = client.put(
        f"/reservations/{reservation_id}",
        json={"Status": "Cancelled"},
        headers=auth_header(customer),
    )
    assert forbidden.status_code == 403

    by_admin = client.put(
        f"/reservations/{reservation_id}",
        json={"Status": "Cancelled"},
        headers=auth_header(admin),
    )
    assert by_admin.status_code == 200
    assert client.put("/reservations/999", json={"Status": "Cancelled"}, headers=auth_header(admin)).status_code == 404
