import logging
from typing import Iterable
from uuid import UUID

from lingocards.repositories.study import WordAnalyticsRepository
from lingocards.schemas.study import WordAnalysisEntry

logger = logging.getLogger(__name__)


class WordAnalyticsReconciler:
    """Folds per-word AI analysis into the cumulative word_analytics rows.

    Runs on the caller's session so the upserts commit or roll back together
    with the study session insert.
    """

    def __init__(self, repo: WordAnalyticsRepository):
        self.repo = repo

    def apply(self, flashcard_id: UUID, entries: Iterable[WordAnalysisEntry]) -> int:
        applied = 0
        for entry in entries:
            self.repo.record_wrong_answer(
                flashcard_id=flashcard_id,
                word_key=entry.word_key,
                ai_mnemonic=entry.ai_mnemonic,
                difficulty_level=entry.difficulty_level,
            )
            applied += 1
        if applied:
            logger.info(f"Updated analytics for {applied} word(s) of flashcard {flashcard_id}")
        return applied
