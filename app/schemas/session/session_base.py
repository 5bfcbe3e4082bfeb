from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common.camel_model import CamelModel


class SessionCreate(CamelModel):
    device_id: str = Field(min_length=1)
    cards_played: int = Field(0, ge=0)


class SessionUpdate(CamelModel):
    ended_at: Optional[datetime] = None
    cards_played: Optional[int] = Field(None, ge=0)
    feedback_count: Optional[int] = Field(None, ge=0)
    duration_ms: Optional[int] = Field(None, ge=0)


class SessionOut(CamelModel):
    id: str
    device_id: str
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    cards_played: int
    feedback_count: int
    duration_ms: Optional[int] = None
