from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.session_db.session_crud import create_session, get_session, increment_cards_played, update_session
from app.schemas.session.session_base import SessionCreate, SessionOut, SessionUpdate

session_router = APIRouter(prefix="/sessions", tags=["Game sessions"])


@session_router.post("/", response_model=SessionOut, status_code=201)
def start_session(session_in: SessionCreate, db: Session = Depends(get_db)):
    return create_session(db, session_in)


@session_router.get("/{session_id}", response_model=SessionOut)
def get_session_route(session_id: str, db: Session = Depends(get_db)):
    game_session = get_session(db, session_id)
    if not game_session:
        raise HTTPException(status_code=404, detail="Session not found")
    return game_session


@session_router.put("/{session_id}", response_model=SessionOut)
def update_session_route(session_id: str, updates: SessionUpdate, db: Session = Depends(get_db)):
    game_session = update_session(db, session_id, updates)
    if not game_session:
        raise HTTPException(status_code=404, detail="Session not found")
    return game_session


@session_router.post("/{session_id}/cards-played", response_model=SessionOut)
def card_played(session_id: str, db: Session = Depends(get_db)):
    game_session = increment_cards_played(db, session_id)
    if not game_session:
        raise HTTPException(status_code=404, detail="Session not found")
    return game_session
