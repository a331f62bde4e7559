from sqlalchemy import Column, String, Integer, DECIMAL
from sqlalchemy.orm import relationship
from restaurant.db.session import Base

class MenuItem(Base):
    __tablename__ = "menu"

    item_id = Column(Integer, primary_key=True, autoincrement=True)
    item_name = Column(String(100), nullable=False)
    category = Column(String(50), nullable=False, default="Other", index=True)
    price = Column(DECIMAL(10, 2), nullable=False) # base price, before any discount

    order_details = relationship("OrderDetail", back_populates="item")
