import logging
from typing import Dict, Iterable, List

from app.schemas.analytics.analytics_base import (
    AnalyticsOverview,
    AnalyticsReport,
    CardStats,
    FeedbackSummary,
)
from app.services.card_types import FeedbackFlag

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 10


def percentage(part: int, whole: int) -> int:
    """100 * part / whole rounded half up; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def _init_buckets(cards: Iterable) -> Dict[str, CardStats]:
    buckets: Dict[str, CardStats] = {}
    for card in cards:
        buckets[card.id] = CardStats(
            card_id=card.id,
            question=card.question,
            category=card.category,
            color=card.color,
        )
    return buckets


def _fold_answers(buckets: Dict[str, CardStats], quiz_answers: Iterable) -> None:
    for answer in quiz_answers:
        stats = buckets.get(answer.card_id)
        if stats is None:
            continue
        stats.total_answers += 1
        if answer.correct:
            stats.correct_answers += 1
        else:
            stats.wrong_answers += 1


def _fold_feedback(buckets: Dict[str, CardStats], feedback_entries: Iterable) -> None:
    for entry in feedback_entries:
        stats = buckets.get(entry.card_id)
        if stats is None:
            continue
        for flag in FeedbackFlag:
            if getattr(entry, flag.value):
                counter = f"{flag.value}_count"
                setattr(stats, counter, getattr(stats, counter) + 1)
                stats.total_feedback += 1


def _top(stats: List[CardStats], field: str, limit: int) -> List[CardStats]:
    # sorted() keeps ties in card order, reverse=True included
    return sorted(stats, key=lambda s: getattr(s, field), reverse=True)[:limit]


def compute_analytics(cards, quiz_answers, feedback_entries, limit: int = DEFAULT_TOP_N) -> AnalyticsReport:
    """
    Roll the raw answer and feedback logs up into per-card statistics,
    three leaderboards and two global summaries.

    Events pointing at cards that no longer exist are left out of the
    per-card numbers but still count in the overview and in the feedback
    summary. Correct and wrong percentages are rounded independently, so
    they may add up to 99 or 101.
    """
    cards = list(cards)
    quiz_answers = list(quiz_answers)
    feedback_entries = list(feedback_entries)

    buckets = _init_buckets(cards)
    _fold_answers(buckets, quiz_answers)
    _fold_feedback(buckets, feedback_entries)

    for stats in buckets.values():
        if stats.total_answers > 0:
            stats.correct_percentage = percentage(stats.correct_answers, stats.total_answers)
            stats.wrong_percentage = percentage(stats.wrong_answers, stats.total_answers)

    card_stats = [s for s in buckets.values() if s.total_feedback >= 1 or s.total_answers >= 1]
    answered = [s for s in card_stats if s.total_answers >= 1]

    total_correct = sum(1 for answer in quiz_answers if answer.correct)
    overview = AnalyticsOverview(
        total_cards=len(cards),
        total_quiz_answers=len(quiz_answers),
        total_correct=total_correct,
        total_wrong=len(quiz_answers) - total_correct,
        overall_correct_percentage=percentage(total_correct, len(quiz_answers)),
        total_feedback_entries=len(feedback_entries),
    )

    summary = FeedbackSummary(**{
        f"total_{flag.value}": sum(1 for entry in feedback_entries if getattr(entry, flag.value))
        for flag in FeedbackFlag
    })

    logger.debug(
        "Analytics over %d cards, %d answers, %d feedback rows (%d active cards)",
        len(cards), len(quiz_answers), len(feedback_entries), len(card_stats),
    )

    return AnalyticsReport(
        overview=overview,
        card_stats=card_stats,
        top_voted_cards=_top(card_stats, "top_count", limit),
        best_performing_cards=_top(answered, "correct_percentage", limit),
        most_difficult_cards=_top(answered, "wrong_percentage", limit),
        feedback_summary=summary,
    )
