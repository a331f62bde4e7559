from sqlalchemy import Column, String, Integer, DECIMAL, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from restaurant.db.session import Base

class Order(Base):
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.reservation_id"), nullable=True)
    status = Column(String(20), default="Pending", nullable=False, index=True) # Pending, Completed
    order_date = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="orders")
    reservation = relationship("Reservation", back_populates="orders")
    details = relationship("OrderDetail", back_populates="order")
    payments = relationship("Payment", back_populates="order")

class OrderDetail(Base):
    __tablename__ = "order_details"

    order_detail_id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.order_id"), nullable=False, index=True)
    item_id = Column(Integer, ForeignKey("menu.item_id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    price = Column(DECIMAL(10, 2), nullable=False) # final per-unit price captured at order time

    order = relationship("Order", back_populates="details")
    item = relationship("MenuItem", back_populates="order_details")
