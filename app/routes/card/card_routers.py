import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import require_admin
from app.models.card_db.card_crud import (
    create_card, delete_card, delete_cards, get_all_cards, get_card,
    get_cards_by_category, get_visible_categories, set_cards_hidden, update_card,
)
from app.schemas.card.card_base import BulkResult, CardBase, CardCreate, CardIds, CardOut, CardUpdate
from app.services.card_selector import select_random_card

logger = logging.getLogger(__name__)

card_router = APIRouter(prefix="/cards", tags=["Cards"])


@card_router.get("/random", response_model=CardOut)
def get_random_card(category: Optional[str] = Query(None), db: Session = Depends(get_db)):
    card = select_random_card(get_all_cards(db), category)
    if not card:
        logger.warning("No cards available for category=%r", category)
        raise HTTPException(status_code=404, detail="No cards available")
    return card


@card_router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    return get_visible_categories(db)


@card_router.get("/", response_model=List[CardOut], dependencies=[Depends(require_admin)])
def list_cards(db: Session = Depends(get_db)):
    return get_all_cards(db)


@card_router.get("/category/{category}", response_model=List[CardOut], dependencies=[Depends(require_admin)])
def list_cards_by_category(category: str, db: Session = Depends(get_db)):
    return get_cards_by_category(db, category)


@card_router.post("/", response_model=CardOut, status_code=201, dependencies=[Depends(require_admin)])
def create_card_route(card_in: CardCreate, db: Session = Depends(get_db)):
    if get_card(db, card_in.id):
        raise HTTPException(status_code=400, detail="Card ID already exists")
    return create_card(db, card_in)


@card_router.post("/bulk/delete", response_model=BulkResult, dependencies=[Depends(require_admin)])
def bulk_delete_cards(payload: CardIds, db: Session = Depends(get_db)):
    return BulkResult(affected=delete_cards(db, payload.ids))


@card_router.post("/bulk/hide", response_model=BulkResult, dependencies=[Depends(require_admin)])
def bulk_hide_cards(payload: CardIds, db: Session = Depends(get_db)):
    return BulkResult(affected=set_cards_hidden(db, payload.ids, True))


@card_router.post("/bulk/show", response_model=BulkResult, dependencies=[Depends(require_admin)])
def bulk_show_cards(payload: CardIds, db: Session = Depends(get_db)):
    return BulkResult(affected=set_cards_hidden(db, payload.ids, False))


@card_router.get("/{card_id}", response_model=CardOut, dependencies=[Depends(require_admin)])
def get_card_route(card_id: str, db: Session = Depends(get_db)):
    card = get_card(db, card_id)
    if not card:
        raise HTTPException(status_code=404, detail="Card not found")
    return card


@card_router.put("/{card_id}", response_model=CardOut, dependencies=[Depends(require_admin)])
def update_card_route(card_id: str, card_in: CardUpdate, db: Session = Depends(get_db)):
    card = get_card(db, card_id)
    if not card:
        raise HTTPException(status_code=404, detail="Card not found")

    changes = card_in.model_dump(exclude_unset=True)
    current = CardOut.model_validate(card).model_dump(exclude={"id", "created_at"})
    try:
        merged = CardBase.model_validate({**current, **changes})
    except ValidationError as e:
        reasons = "; ".join(err["msg"] for err in e.errors())
        raise HTTPException(status_code=400, detail=f"Invalid card data: {reasons}")

    values = merged.model_dump(mode="json")
    return update_card(db, card_id, {field: values[field] for field in changes})


@card_router.delete("/{card_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_card_route(card_id: str, db: Session = Depends(get_db)):
    if not delete_card(db, card_id):
        raise HTTPException(status_code=404, detail="Card not found")
    return Response(status_code=204)
