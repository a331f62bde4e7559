from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from restaurant.db.session import get_db
from restaurant.api.deps import get_current_user
from restaurant.core.permissions import ensure_authorized
from restaurant.models.feedback import Feedback
from restaurant.models.user import User
from restaurant.schemas.common import DataResponse, ListResponse
from restaurant.schemas.feedback import Feedback as FeedbackSchema, FeedbackCreate

router = APIRouter(prefix="/api/feedback", tags=["Feedback"])

MIN_RATING = 1
MAX_RATING = 10


def serialize_feedback(feedback: Feedback) -> FeedbackSchema:
    return FeedbackSchema(
        feedback_id=feedback.feedback_id,
        user_id=feedback.user_id,
        user_name=feedback.user.name if feedback.user else None,
        rating=feedback.rating,
        comments=feedback.comments,
        feedback_date=feedback.feedback_date,
    )


@router.post("", response_model=DataResponse[FeedbackSchema], status_code=status.HTTP_201_CREATED)
def submit_feedback(
    data: FeedbackCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Submit a 1-10 rating with optional comments."""
    ensure_authorized(current_user, owner_id=data.user_id)
    if not (MIN_RATING <= data.rating <= MAX_RATING):
        raise HTTPException(
            status_code=400,
            detail=f"Rating must be between {MIN_RATING} and {MAX_RATING}",
        )

    user = db.query(User).filter(User.user_id == data.user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    feedback = Feedback(user_id=user.user_id, rating=data.rating, comments=data.comments or None)
    db.add(feedback)
    db.commit()
    db.refresh(feedback)
    return DataResponse(message="Feedback submitted successfully", data=serialize_feedback(feedback))


@router.get("/user/{user_id}", response_model=ListResponse[FeedbackSchema])
def list_user_feedback(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Return one user's feedback history, newest first."""
    ensure_authorized(current_user, owner_id=user_id)
    rows = (
        db.query(Feedback)
        .options(joinedload(Feedback.user))
        .filter(Feedback.user_id == user_id)
        .order_by(Feedback.feedback_date.desc(), Feedback.feedback_id.desc())
        .all()
    )
    return ListResponse(count=len(rows), data=[serialize_feedback(f) for f in rows])
