import logging

from sqlalchemy.orm import Session

from app.models.session_db.game_session_db import GameSession
from app.schemas.session.session_base import SessionCreate, SessionUpdate

logger = logging.getLogger(__name__)


def create_session(db: Session, session_in: SessionCreate) -> GameSession:
    game_session = GameSession(device_id=session_in.device_id, cards_played=session_in.cards_played)
    db.add(game_session)
    db.commit()
    db.refresh(game_session)
    logger.info("Game session %s started for device %s", game_session.id, game_session.device_id)
    return game_session


def get_session(db: Session, session_id: str):
    return db.query(GameSession).filter(GameSession.id == session_id).first()


def update_session(db: Session, session_id: str, updates: SessionUpdate):
    game_session = get_session(db, session_id)
    if not game_session:
        return None

    for field, value in updates.model_dump(exclude_unset=True).items():
        setattr(game_session, field, value)

    db.commit()
    db.refresh(game_session)
    if updates.ended_at is not None:
        logger.info("Game session %s ended after %d cards", session_id, game_session.cards_played)
    return game_session


def increment_cards_played(db: Session, session_id: str):
    updated = (
        db.query(GameSession)
        .filter(GameSession.id == session_id)
        .update({GameSession.cards_played: GameSession.cards_played + 1}, synchronize_session=False)
    )
    db.commit()
    if not updated:
        return None
    return get_session(db, session_id)


def increment_feedback_count(db: Session, session_id: str) -> bool:
    updated = (
        db.query(GameSession)
        .filter(GameSession.id == session_id)
        .update({GameSession.feedback_count: GameSession.feedback_count + 1}, synchronize_session=False)
    )
    return bool(updated)
