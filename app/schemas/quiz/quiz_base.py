from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common.camel_model import CamelModel
from app.services.card_types import OptionLabel


class QuizAnswerCreate(CamelModel):
    session_id: str
    card_id: str
    device_id: str
    selected_option: OptionLabel
    time_ms: Optional[int] = Field(None, ge=0)


class QuizAnswerOut(CamelModel):
    id: str
    session_id: str
    card_id: str
    device_id: str
    selected_option: Optional[str] = None
    correct: bool
    time_ms: Optional[int] = None
    created_at: Optional[datetime] = None
