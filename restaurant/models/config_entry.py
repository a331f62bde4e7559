from sqlalchemy import Column, String, DateTime, func
from restaurant.db.session import Base

class ConfigEntry(Base):
    """Key/value markers for one-shot maintenance jobs."""
    __tablename__ = "config"

    config_key = Column(String(50), primary_key=True)
    config_value = Column(String(255), nullable=True)
    last_updated = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
