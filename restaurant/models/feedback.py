from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from restaurant.db.session import Base

class Feedback(Base):
    __tablename__ = "feedback"

    feedback_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False) # 1-10
    comments = Column(String(500), nullable=True)
    feedback_date = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="feedback")
