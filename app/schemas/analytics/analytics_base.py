from typing import List

from app.schemas.common.camel_model import CamelModel


class CardStats(CamelModel):
    card_id: str
    question: str
    category: str
    color: str
    total_answers: int = 0
    correct_answers: int = 0
    wrong_answers: int = 0
    correct_percentage: int = 0
    wrong_percentage: int = 0
    review_count: int = 0
    top_count: int = 0
    easy_count: int = 0
    hard_count: int = 0
    fun_count: int = 0
    boring_count: int = 0
    total_feedback: int = 0


class AnalyticsOverview(CamelModel):
    total_cards: int = 0
    total_quiz_answers: int = 0
    total_correct: int = 0
    total_wrong: int = 0
    overall_correct_percentage: int = 0
    total_feedback_entries: int = 0


class FeedbackSummary(CamelModel):
    total_review: int = 0
    total_top: int = 0
    total_easy: int = 0
    total_hard: int = 0
    total_fun: int = 0
    total_boring: int = 0


class AnalyticsReport(CamelModel):
    overview: AnalyticsOverview
    card_stats: List[CardStats]
    top_voted_cards: List[CardStats]
    best_performing_cards: List[CardStats]
    most_difficult_cards: List[CardStats]
    feedback_summary: FeedbackSummary
