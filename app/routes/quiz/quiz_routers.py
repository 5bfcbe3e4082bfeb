import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import require_admin
from app.models.card_db.card_crud import get_card
from app.models.quiz_db.quiz_crud import (
    count_answers, delete_all_answers, get_answers_by_session, get_answers_page, record_answer,
)
from app.schemas.common.page_response import PageResponse
from app.schemas.quiz.quiz_base import QuizAnswerCreate, QuizAnswerOut
from app.services.card_types import CardType

logger = logging.getLogger(__name__)

quiz_router = APIRouter(prefix="/quiz-answers", tags=["Quiz answers"])


@quiz_router.post("/", response_model=QuizAnswerOut, status_code=201)
def submit_answer(answer_in: QuizAnswerCreate, db: Session = Depends(get_db)):
    card = get_card(db, answer_in.card_id)
    if not card:
        logger.warning("Answer submitted for unknown card %s", answer_in.card_id)
        raise HTTPException(status_code=404, detail="Card not found")
    if card.card_type != CardType.quiz.value:
        raise HTTPException(status_code=400, detail="Card is not a quiz card")
    return record_answer(db, card, answer_in)


@quiz_router.get("/", response_model=PageResponse[QuizAnswerOut], dependencies=[Depends(require_admin)])
def list_answers(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db)
):
    skip = (page - 1) * size
    total = count_answers(db)
    answers = get_answers_page(db, skip, size)

    return PageResponse[QuizAnswerOut](
        page=page,
        size=size,
        total=total,
        has_next=(page * size) < total,
        has_prev=page > 1,
        items=answers
    )


@quiz_router.get("/session/{session_id}", response_model=List[QuizAnswerOut], dependencies=[Depends(require_admin)])
def list_session_answers(session_id: str, db: Session = Depends(get_db)):
    return get_answers_by_session(db, session_id)


@quiz_router.delete("/", dependencies=[Depends(require_admin)])
def purge_answers(db: Session = Depends(get_db)):
    return {"deleted": delete_all_answers(db)}
