import logging
from typing import List

from sqlalchemy.orm import Session

from app.models.card_db.card_db import Card
from app.schemas.card.card_base import CardCreate

logger = logging.getLogger(__name__)


def get_all_cards(db: Session) -> List[Card]:
    """
    Cards in creation order. Analytics leaderboards break ties in this order;
    cards sharing a `created_at` (or with none, on legacy rows) fall back to
    id order.
    """
    return db.query(Card).order_by(Card.created_at, Card.id).all()


def get_cards_by_category(db: Session, category: str) -> List[Card]:
    return db.query(Card).filter(Card.category == category).order_by(Card.created_at, Card.id).all()


def get_visible_categories(db: Session) -> List[str]:
    rows = db.query(Card.category).filter(Card.hidden.is_(False)).distinct().order_by(Card.category).all()
    return [row[0] for row in rows]


def get_card(db: Session, card_id: str):
    return db.query(Card).filter(Card.id == card_id).first()


def create_card(db: Session, card_in: CardCreate) -> Card:
    card = Card(**card_in.model_dump(mode="json"))
    db.add(card)
    db.commit()
    db.refresh(card)
    logger.info("Card %s created in category %s", card.id, card.category)
    return card


def update_card(db: Session, card_id: str, changes: dict):
    card = get_card(db, card_id)
    if not card:
        return None

    for field, value in changes.items():
        setattr(card, field, value)

    db.commit()
    db.refresh(card)
    logger.info("Card %s updated (%s)", card_id, ", ".join(sorted(changes)))
    return card


def delete_card(db: Session, card_id: str) -> bool:
    card = get_card(db, card_id)
    if not card:
        return False
    db.delete(card)
    db.commit()
    logger.info("Card %s deleted", card_id)
    return True


def delete_cards(db: Session, ids: List[str]) -> int:
    if not ids:
        return 0
    affected = db.query(Card).filter(Card.id.in_(ids)).delete(synchronize_session=False)
    db.commit()
    logger.info("Bulk delete removed %d cards", affected)
    return affected


def set_cards_hidden(db: Session, ids: List[str], hidden: bool) -> int:
    if not ids:
        return 0
    affected = (
        db.query(Card)
        .filter(Card.id.in_(ids))
        .update({Card.hidden: hidden}, synchronize_session=False)
    )
    db.commit()
    logger.info("Bulk %s affected %d cards", "hide" if hidden else "show", affected)
    return affected
