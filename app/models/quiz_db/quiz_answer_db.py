import uuid
from sqlalchemy import Column, String, Boolean, Integer, DateTime
from app.core.database import Base
from datetime import datetime


class QuizAnswer(Base):
    __tablename__ = "quiz_answers"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    # no FK on card_id: answers outlive deleted cards
    session_id = Column(String, nullable=False, index=True)
    card_id = Column(String, nullable=False, index=True)
    device_id = Column(String, nullable=False)
    selected_option = Column(String(1), nullable=True)
    correct = Column(Boolean, nullable=False)
    time_ms = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
