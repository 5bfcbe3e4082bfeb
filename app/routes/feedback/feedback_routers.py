from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import require_admin
from app.models.feedback_db.feedback_crud import (
    delete_all_feedback, get_all_feedback, get_feedback_by_card, record_feedback,
)
from app.schemas.feedback.feedback_base import FeedbackCreate, FeedbackOut
from app.services.card_types import FeedbackFlag

feedback_router = APIRouter(prefix="/feedback", tags=["Feedback"])


@feedback_router.post("/", response_model=FeedbackOut, status_code=201)
def submit_feedback(feedback_in: FeedbackCreate, db: Session = Depends(get_db)):
    if not any(getattr(feedback_in, flag.value) for flag in FeedbackFlag):
        raise HTTPException(status_code=400, detail="At least one feedback flag must be set")
    return record_feedback(db, feedback_in)


@feedback_router.get("/", response_model=List[FeedbackOut], dependencies=[Depends(require_admin)])
def list_feedback(db: Session = Depends(get_db)):
    return get_all_feedback(db)


@feedback_router.get("/card/{card_id}", response_model=List[FeedbackOut], dependencies=[Depends(require_admin)])
def list_card_feedback(card_id: str, db: Session = Depends(get_db)):
    return get_feedback_by_card(db, card_id)


@feedback_router.delete("/", dependencies=[Depends(require_admin)])
def purge_feedback(db: Session = Depends(get_db)):
    return {"deleted": delete_all_feedback(db)}
