from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, joinedload

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_admin_user
from restaurant.api.public.feedback import serialize_feedback
from restaurant.models.feedback import Feedback
from restaurant.models.user import User
from restaurant.schemas.common import ListResponse
from restaurant.schemas.feedback import Feedback as FeedbackSchema

router = APIRouter(prefix="/api/feedback", tags=["Admin - Feedback"])


@router.get("", response_model=ListResponse[FeedbackSchema])
def list_feedback(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    rows = (
        db.query(Feedback)
        .options(joinedload(Feedback.user))
        .order_by(Feedback.feedback_date.desc(), Feedback.feedback_id.desc())
        .all()
    )
    return ListResponse(count=len(rows), data=[serialize_feedback(f) for f in rows])
