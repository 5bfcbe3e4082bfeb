import uuid
from sqlalchemy import Column, String, Boolean, DateTime
from app.core.database import Base
from datetime import datetime


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    card_id = Column(String, nullable=False, index=True)
    device_id = Column(String, nullable=False, index=True)
    session_id = Column(String, nullable=True, index=True)

    review = Column(Boolean, nullable=False, default=False)  # wants to review later
    top = Column(Boolean, nullable=False, default=False)  # top quality card
    easy = Column(Boolean, nullable=False, default=False)
    hard = Column(Boolean, nullable=False, default=False)
    fun = Column(Boolean, nullable=False, default=False)
    boring = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)
