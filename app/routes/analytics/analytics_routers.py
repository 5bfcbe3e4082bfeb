from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.security import require_admin
from app.models.card_db.card_crud import get_all_cards
from app.models.feedback_db.feedback_crud import get_all_feedback
from app.models.quiz_db.quiz_crud import get_all_answers
from app.schemas.analytics.analytics_base import AnalyticsReport
from app.services.analytics import compute_analytics

analytics_router = APIRouter(prefix="/analytics", tags=["Analytics"])


@analytics_router.get("/", response_model=AnalyticsReport, dependencies=[Depends(require_admin)])
def get_analytics(db: Session = Depends(get_db)):
    return compute_analytics(
        get_all_cards(db),
        get_all_answers(db),
        get_all_feedback(db),
        limit=settings.ANALYTICS_TOP_N,
    )
