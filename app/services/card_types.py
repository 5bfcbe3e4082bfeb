from enum import Enum


class CardType(str, Enum):
    quiz = "quiz"
    special = "special"


class OptionLabel(str, Enum):
    a = "A"
    b = "B"
    c = "C"


class FeedbackFlag(str, Enum):
    review = "review"
    top = "top"
    easy = "easy"
    hard = "hard"
    fun = "fun"
    boring = "boring"
