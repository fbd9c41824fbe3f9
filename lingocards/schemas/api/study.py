from datetime import datetime
from typing import Optional
from uuid import UUID

from lingocards.schemas.base import CamelModel
from lingocards.schemas.study import AIAnalysis


class StudySessionDTO(CamelModel):
    id: int
    flashcard_id: UUID
    known_count: int
    unknown_count: int
    skipped_count: int
    ai_feedback: Optional[str] = None
    created_at: datetime


class AnalyzeSessionResponse(CamelModel):
    study_session: StudySessionDTO
    ai_analysis: Optional[AIAnalysis] = None
