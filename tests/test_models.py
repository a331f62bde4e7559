from sqlalchemy import inspect
from sqlalchemy.orm import configure_mappers

from conftest import future_day
from restaurant.db.base import Base
from restaurant.models.reservation import Reservation


def test_mappers_configure():
    configure_mappers()


def test_all_tables_registered():
    assert set(Base.metadata.tables) == {
        "users",
        "table_types",
        "tables",
        "reservations",
        "menu",
        "orders",
        "order_details",
        "payments",
        "staff",
        "feedback",
        "config",
    }


def test_schema_created(db_session):
    tables = set(inspect(db_session.get_bind()).get_table_names())
    assert {"users", "reservations", "order_details"} <= tables


def test_reservation_defaults(db_session, customer, tables):
    reservation = Reservation(
        user_id=customer.user_id, table_id=tables[0].table_id, date=future_day(),
        start_time=18, end_time=20, people=2,
    )
    db_session.add(reservation)
    db_session.commit()
    assert reservation.status == "Pending"
    assert reservation.table.location == "Window"
    assert reservation.user.reservations == [reservation]
