import logging
from typing import List

from sqlalchemy.orm import Session

from app.models.feedback_db.feedback_db import Feedback
from app.models.session_db.session_crud import increment_feedback_count
from app.schemas.feedback.feedback_base import FeedbackCreate

logger = logging.getLogger(__name__)


def record_feedback(db: Session, feedback_in: FeedbackCreate) -> Feedback:
    entry = Feedback(**feedback_in.model_dump())
    db.add(entry)
    if entry.session_id and not increment_feedback_count(db, entry.session_id):
        logger.debug("Feedback for unknown session %s", entry.session_id)
    db.commit()
    db.refresh(entry)
    return entry


def get_all_feedback(db: Session) -> List[Feedback]:
    return db.query(Feedback).order_by(Feedback.created_at).all()


def get_feedback_by_card(db: Session, card_id: str) -> List[Feedback]:
    return db.query(Feedback).filter(Feedback.card_id == card_id).order_by(Feedback.created_at).all()


def delete_all_feedback(db: Session) -> int:
    deleted = db.query(Feedback).delete(synchronize_session=False)
    db.commit()
    logger.info("Purged %d feedback entries", deleted)
    return deleted
