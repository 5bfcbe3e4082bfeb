import logging
from typing import List

from sqlalchemy.orm import Session

from app.models.card_db.card_db import Card
from app.models.quiz_db.quiz_answer_db import QuizAnswer
from app.schemas.quiz.quiz_base import QuizAnswerCreate

logger = logging.getLogger(__name__)


def record_answer(db: Session, card: Card, answer_in: QuizAnswerCreate) -> QuizAnswer:
    # correctness is fixed here and never recomputed, even if the card changes later
    selected = answer_in.selected_option.value
    answer = QuizAnswer(
        session_id=answer_in.session_id,
        card_id=card.id,
        device_id=answer_in.device_id,
        selected_option=selected,
        correct=selected == card.correct_option,
        time_ms=answer_in.time_ms,
    )
    db.add(answer)
    db.commit()
    db.refresh(answer)
    return answer


def get_all_answers(db: Session) -> List[QuizAnswer]:
    return db.query(QuizAnswer).order_by(QuizAnswer.created_at).all()


def count_answers(db: Session) -> int:
    return db.query(QuizAnswer).count()


def get_answers_page(db: Session, skip: int, limit: int) -> List[QuizAnswer]:
    return db.query(QuizAnswer).order_by(QuizAnswer.created_at).offset(skip).limit(limit).all()


def get_answers_by_session(db: Session, session_id: str) -> List[QuizAnswer]:
    return db.query(QuizAnswer).filter(QuizAnswer.session_id == session_id).order_by(QuizAnswer.created_at).all()


def delete_all_answers(db: Session) -> int:
    deleted = db.query(QuizAnswer).delete(synchronize_session=False)
    db.commit()
    logger.info("Purged %d quiz answers", deleted)
    return deleted
