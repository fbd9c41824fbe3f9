from lingocards.schemas.api.common import ApiResponse
from lingocards.schemas.api.flashcards import (
    FlashcardCreate,
    FlashcardDTO,
    FlashcardUpdate,
    WordAnalyticsDTO,
)
from lingocards.schemas.api.health import HealthResponse
from lingocards.schemas.api.languages import LanguageDTO
from lingocards.schemas.api.study import AnalyzeSessionResponse, StudySessionDTO

__all__ = [
    "ApiResponse",
    "FlashcardCreate",
    "FlashcardDTO",
    "FlashcardUpdate",
    "WordAnalyticsDTO",
    "HealthResponse",
    "LanguageDTO",
    "AnalyzeSessionResponse",
    "StudySessionDTO",
]
