from sqlalchemy import Column, String, Boolean, Integer, DateTime, Text
from app.core.database import Base
from datetime import datetime


class Card(Base):
    __tablename__ = "cards"

    id = Column(String, primary_key=True, index=True)  # externally assigned, e.g. "V041"
    category = Column(String, nullable=False, index=True)
    color = Column(String, nullable=False)
    question = Column(Text, nullable=False)
    option_a = Column(Text, nullable=True)
    option_b = Column(Text, nullable=True)
    option_c = Column(Text, nullable=True)
    correct_option = Column(String(1), nullable=True)  # 'A', 'B', 'C' or None
    punchline = Column(Text, nullable=True)
    card_type = Column(String, nullable=False)  # 'quiz' or 'special'
    hidden = Column(Boolean, nullable=False, default=False)
    weight = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, default=datetime.utcnow)
