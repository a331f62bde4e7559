from sqlalchemy import Column, String, Integer
from restaurant.db.session import Base

class Staff(Base):
    __tablename__ = "staff"

    staff_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    role = Column(String(50), nullable=False, index=True) # Chef, Waiter, Manager, ...
    contact_info = Column(String(100), nullable=True)
