import logging
from typing import Optional

from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import SessionLocal
from app.models.card_db.card_db import Card
from app.models.user_db.user_db_crud import create_user, get_user_by_username

logger = logging.getLogger(__name__)


card_data = [
    {
        "id": "V001",
        "category": "Animals",
        "color": "green",
        "question": "How many hearts does an octopus have?",
        "option_a": "One",
        "option_b": "Two",
        "option_c": "Three",
        "correct_option": "C",
        "punchline": "Two for the gills, one for everything else.",
        "card_type": "quiz",
    },
    {
        "id": "V002",
        "category": "Animals",
        "color": "green",
        "question": "Which animal sleeps standing up?",
        "option_a": "Horse",
        "option_b": "Cat",
        "option_c": "Owl",
        "correct_option": "A",
        "card_type": "quiz",
    },
    {
        "id": "V003",
        "category": "Geography",
        "color": "blue",
        "question": "What is the capital of Australia?",
        "option_a": "Sydney",
        "option_b": "Canberra",
        "option_c": "Melbourne",
        "correct_option": "B",
        "card_type": "quiz",
        "weight": 2,
    },
    {
        "id": "S001",
        "category": "Geography",
        "color": "yellow",
        "question": "Everyone names a country starting with the letter B. Last one standing wins!",
        "card_type": "special",
    },
]


def seed_cards(db: Optional[Session] = None):
    owns_session = db is None
    if owns_session:
        db = SessionLocal()

    try:
        for data in card_data:
            exists = db.query(Card).filter(Card.id == data["id"]).first()
            if not exists:
                db.add(Card(**data))
        db.commit()

        username = settings.CMS_ADMIN_USERNAME
        password = settings.CMS_ADMIN_PASSWORD
        if password and not get_user_by_username(db, username):
            create_user(db, username, password, is_admin=True)
            logger.info("CMS admin %s created", username)
    finally:
        if owns_session:
            db.close()

    logger.info("Cards seeded")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_cards()
