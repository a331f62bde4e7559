from restaurant.models.user import User
from restaurant.models.table import TableType, Table
from restaurant.models.reservation import Reservation, ReservationStatus
from restaurant.models.menu import MenuItem
from restaurant.models.order import Order, OrderDetail
from restaurant.models.payment import Payment
from restaurant.models.staff import Staff
from restaurant.models.feedback import Feedback
from restaurant.models.config_entry import ConfigEntry
