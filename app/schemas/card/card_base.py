from datetime import datetime
from typing import List, Optional

from pydantic import Field, model_validator

from app.schemas.common.camel_model import CamelModel
from app.services.card_types import CardType, OptionLabel


class CardBase(CamelModel):
    category: str = Field(min_length=1)
    color: str
    question: str = Field(min_length=1)
    option_a: Optional[str] = None
    option_b: Optional[str] = None
    option_c: Optional[str] = None
    correct_option: Optional[OptionLabel] = None
    punchline: Optional[str] = None
    card_type: CardType = CardType.quiz
    hidden: bool = False
    weight: int = Field(1, ge=1)

    @model_validator(mode="after")
    def check_card_shape(self):
        if self.card_type == CardType.quiz:
            if not (self.option_a and self.option_b and self.option_c):
                raise ValueError("A quiz card needs all three options")
            if self.correct_option is None:
                raise ValueError("A quiz card needs a correct option")
        elif self.correct_option is not None:
            raise ValueError("A special card cannot have a correct option")
        return self


class CardCreate(CardBase):
    id: str = Field(min_length=1)


class CardUpdate(CamelModel):
    category: Optional[str] = None
    color: Optional[str] = None
    question: Optional[str] = None
    option_a: Optional[str] = None
    option_b: Optional[str] = None
    option_c: Optional[str] = None
    correct_option: Optional[OptionLabel] = None
    punchline: Optional[str] = None
    card_type: Optional[CardType] = None
    hidden: Optional[bool] = None
    weight: Optional[int] = Field(None, ge=1)


class CardOut(CamelModel):
    id: str
    category: str
    color: str
    question: str
    option_a: Optional[str] = None
    option_b: Optional[str] = None
    option_c: Optional[str] = None
    correct_option: Optional[str] = None
    punchline: Optional[str] = None
    card_type: str
    hidden: bool
    weight: int
    created_at: Optional[datetime] = None


class CardIds(CamelModel):
    ids: List[str]


class BulkResult(CamelModel):
    affected: int
