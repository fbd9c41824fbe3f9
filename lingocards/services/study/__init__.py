from lingocards.services.study.analytics import WordAnalyticsReconciler
from lingocards.services.study.deck import CardState, CardStatus, StudyDeck
from lingocards.services.study.sessions import AnalysisOutcome, AnalyzeResult, StudySessionService

__all__ = [
    "WordAnalyticsReconciler",
    "CardState",
    "CardStatus",
    "StudyDeck",
    "AnalysisOutcome",
    "AnalyzeResult",
    "StudySessionService",
]
