from datetime import datetime
from typing import Optional

from app.schemas.common.camel_model import CamelModel


class FeedbackFlags(CamelModel):
    review: bool = False
    top: bool = False
    easy: bool = False
    hard: bool = False
    fun: bool = False
    boring: bool = False


class FeedbackCreate(FeedbackFlags):
    card_id: str
    device_id: str
    session_id: Optional[str] = None


class FeedbackOut(FeedbackCreate):
    id: str
    created_at: Optional[datetime] = None
