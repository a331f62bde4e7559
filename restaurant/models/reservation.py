import enum
from sqlalchemy import Column, String, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship
from restaurant.db.session import Base

class ReservationStatus(str, enum.Enum):
    pending = "Pending"
    confirmed = "Confirmed"
    completed = "Completed"
    cancelled = "Cancelled"

class Reservation(Base):
    __tablename__ = "reservations"

    reservation_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    table_id = Column(Integer, ForeignKey("tables.table_id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    start_time = Column(Integer, nullable=False) # hour of day, inclusive
    end_time = Column(Integer, nullable=False)   # hour of day, exclusive
    people = Column(Integer, nullable=False)
    status = Column(String(20), default=ReservationStatus.pending.value, nullable=False, index=True)
    satisfaction_rating = Column(Integer, nullable=True)

    # Relationships
    user = relationship("User", back_populates="reservations")
    table = relationship("Table", back_populates="reservations")
    orders = relationship("Order", back_populates="reservation")
