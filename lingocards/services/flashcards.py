import logging
from typing import List, Optional
from uuid import UUID

from lingocards.exceptions import NotFoundError, ValidationError
from lingocards.models.flashcard import Flashcard
from lingocards.models.study_session import StudySession
from lingocards.models.word_analytics import WordAnalytics
from lingocards.repositories.flashcards import FlashcardRepository
from lingocards.repositories.languages import LanguageRepository
from lingocards.repositories.study import StudySessionRepository, WordAnalyticsRepository
from lingocards.schemas.api.flashcards import FlashcardCreate, FlashcardUpdate
from lingocards.schemas.flashcards import WordPairInput

logger = logging.getLogger(__name__)


class FlashcardService:
    """Flashcard use cases: listing, CRUD with validation, study history."""

    def __init__(
        self,
        repo: FlashcardRepository,
        languages: LanguageRepository,
        study_sessions: StudySessionRepository,
        word_analytics: WordAnalyticsRepository,
    ):
        self.repo = repo
        self.languages = languages
        self.study_sessions = study_sessions
        self.word_analytics = word_analytics

    def list_all(self) -> List[Flashcard]:
        return self.repo.get_all()

    def list_by_language(self, language_id: int) -> List[Flashcard]:
        return self.repo.get_by_language(language_id)

    def get(self, flashcard_id: UUID) -> Flashcard:
        flashcard = self.repo.get_by_id(flashcard_id)
        if flashcard is None:
            raise NotFoundError("Flashcard not found")
        return flashcard

    def create(self, data: FlashcardCreate) -> Flashcard:
        if not data.title or not data.title.strip():
            raise ValidationError("Title is required")
        if data.language_id is None:
            raise ValidationError("Language ID is required")
        self._require_language(data.language_id)
        words = self._validate_words(data.words)

        flashcard = self.repo.create(
            title=data.title.strip(),
            description=data.description,
            notes=data.notes,
            words=words,
            language_id=data.language_id,
        )
        logger.info(f"Created flashcard {flashcard.id} with {len(words)} word(s)")
        return flashcard

    def update(self, flashcard_id: UUID, data: FlashcardUpdate) -> Flashcard:
        flashcard = self.get(flashcard_id)
        changes = data.model_dump(exclude_unset=True)

        if "title" in changes:
            if not changes["title"] or not changes["title"].strip():
                raise ValidationError("Title cannot be empty")
            changes["title"] = changes["title"].strip()
        if "words" in changes:
            changes["words"] = self._validate_words(data.words)
        if "language_id" in changes:
            if changes["language_id"] is None:
                raise ValidationError("Language ID cannot be empty")
            self._require_language(changes["language_id"])

        return self.repo.update(flashcard, **changes)

    def delete(self, flashcard_id: UUID) -> None:
        flashcard = self.get(flashcard_id)
        self.repo.delete(flashcard)
        logger.info(f"Deleted flashcard {flashcard_id}")

    def get_history(self, flashcard_id: UUID, limit: int = 50) -> List[StudySession]:
        self.get(flashcard_id)
        return self.study_sessions.get_for_flashcard(flashcard_id, limit=limit)

    def get_word_analytics(self, flashcard_id: UUID) -> List[WordAnalytics]:
        self.get(flashcard_id)
        return self.word_analytics.get_for_flashcard(flashcard_id)

    def _require_language(self, language_id: int) -> None:
        if self.languages.get_by_id(language_id) is None:
            raise ValidationError(f"Language {language_id} does not exist")

    def _validate_words(self, words: Optional[List[WordPairInput]]) -> List[dict]:
        if not words:
            raise ValidationError("At least one word pair is required")

        validated = []
        for word in words:
            front = (word.front or "").strip()
            back = (word.back or "").strip()
            if not front or not back:
                raise ValidationError("Each word must have front and back values")
            validated.append({"front": front, "back": back})
        return validated
