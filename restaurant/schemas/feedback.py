from datetime import datetime
from typing import Optional
from pydantic import Field

from restaurant.schemas.common import APIModel


class FeedbackCreate(APIModel):
    user_id: int = Field(alias="userId")
    rating: int
    comments: Optional[str] = Field(None, max_length=500)


class Feedback(APIModel):
    feedback_id: int = Field(alias="FeedbackID")
    user_id: int = Field(alias="UserID")
    user_name: Optional[str] = Field(None, alias="UserName")
    rating: int = Field(alias="Rating")
    comments: Optional[str] = Field(None, alias="Comments")
    feedback_date: Optional[datetime] = Field(None, alias="FeedbackDate")
