from sqlalchemy import Column, String, Integer, DECIMAL, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from restaurant.db.session import Base

class Payment(Base):
    __tablename__ = "payments"

    payment_id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.order_id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=True, index=True)
    amount = Column(DECIMAL(10, 2), nullable=False)
    payment_method = Column(String(50), nullable=False, default="Credit Card")
    status = Column(String(20), default="Pending", nullable=False, index=True) # Pending, Completed
    payment_date = Column(DateTime(timezone=True), server_default=func.now())

    order = relationship("Order", back_populates="payments")
    user = relationship("User")
