from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from restaurant.db.session import Base

class TableType(Base):
    __tablename__ = "table_types"

    table_type_id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(50), nullable=False)

    tables = relationship("Table", back_populates="table_type")

class Table(Base):
    __tablename__ = "tables"

    table_id = Column(Integer, primary_key=True, autoincrement=True)
    table_type_id = Column(Integer, ForeignKey("table_types.table_type_id"), nullable=False, index=True)
    location = Column(String(100), nullable=True)
    capacity = Column(Integer, nullable=False)

    # Relationships
    table_type = relationship("TableType", back_populates="tables")
    reservations = relationship("Reservation", back_populates="table")
