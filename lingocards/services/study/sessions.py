import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lingocards.exceptions import NotFoundError, PersistenceError, UnrecognizedResponseError, ValidationError, WebhookError
from lingocards.models.flashcard import Flashcard
from lingocards.models.study_session import StudySession
from lingocards.repositories.flashcards import FlashcardRepository
from lingocards.repositories.study import StudySessionRepository, WordAnalyticsRepository
from lingocards.schemas.study import AIAnalysis, SessionTallies
from lingocards.services.study.analytics import WordAnalyticsReconciler
from lingocards.services.webhook.client import AnalysisWebhookClient
from lingocards.services.webhook.normalizer import normalize_analysis

logger = logging.getLogger(__name__)


@dataclass
class AnalysisOutcome:
    """What happened when asking the workflow for feedback.

    ``attempted`` is False when the call was skipped (no URL or no unknown
    words). ``error`` is set when the call was made but gave no analysis.
    """

    analysis: Optional[AIAnalysis] = None
    attempted: bool = False
    error: Optional[WebhookError] = None


@dataclass
class AnalyzeResult:
    study_session: StudySession
    ai_analysis: Optional[AIAnalysis]
    outcome: AnalysisOutcome


class StudySessionService:
    """Persists finished study runs and reconciles AI feedback."""

    def __init__(
        self,
        session: Session,
        webhook_client: Optional[AnalysisWebhookClient] = None,
    ):
        self.session = session
        self.flashcards = FlashcardRepository(session)
        self.study_sessions = StudySessionRepository(session)
        self.reconciler = WordAnalyticsReconciler(WordAnalyticsRepository(session))
        self.webhook = webhook_client

    def save(self, flashcard_id: Optional[UUID], tallies: Optional[SessionTallies]) -> StudySession:
        """Store a run without AI analysis."""
        flashcard = self._get_flashcard(flashcard_id, tallies)
        return self._persist(flashcard, tallies, analysis=None)

    async def analyze(
        self,
        flashcard_id: Optional[UUID],
        tallies: Optional[SessionTallies],
        webhook_url: Optional[str] = None,
    ) -> AnalyzeResult:
        """Store a run, attaching AI feedback when the workflow provides it.

        Webhook problems only cost the analysis; the run is saved regardless.
        Only a failed save raises.
        """
        flashcard = self._get_flashcard(flashcard_id, tallies)
        # Release the pooled connection before waiting on the workflow
        self.session.commit()
        outcome = await self.request_analysis(flashcard, tallies, webhook_url)
        study_session = self._persist(flashcard, tallies, outcome.analysis)
        return AnalyzeResult(
            study_session=study_session,
            ai_analysis=outcome.analysis,
            outcome=outcome,
        )

    async def request_analysis(
        self,
        flashcard: Flashcard,
        tallies: SessionTallies,
        webhook_url: Optional[str],
    ) -> AnalysisOutcome:
        if not webhook_url or self.webhook is None:
            logger.info("No analysis webhook configured; skipping AI analysis")
            return AnalysisOutcome()
        if not tallies.unknown_words:
            logger.info(f"No unknown words for flashcard {flashcard.id}; skipping AI analysis")
            return AnalysisOutcome()

        payload = self.build_payload(flashcard, tallies)
        result = await asyncio.to_thread(self.webhook.post, webhook_url, payload)
        if not result.ok:
            logger.warning(f"AI analysis unavailable for flashcard {flashcard.id}: {result.error}")
            return AnalysisOutcome(attempted=True, error=result.error)

        analysis = normalize_analysis(result.body)
        if analysis is None:
            error = UnrecognizedResponseError(
                f"Unrecognized webhook response shape: {str(result.body)[:200]}"
            )
            logger.warning(f"AI analysis unavailable for flashcard {flashcard.id}: {error}")
            return AnalysisOutcome(attempted=True, error=error)

        logger.info(
            f"AI analysis received for flashcard {flashcard.id}: "
            f"{len(analysis.word_analysis)} word(s)"
        )
        return AnalysisOutcome(analysis=analysis, attempted=True)

    def build_payload(self, flashcard: Flashcard, tallies: SessionTallies) -> Dict[str, Any]:
        language = flashcard.language
        return {
            "flashcardId": str(flashcard.id),
            "flashcardTitle": flashcard.title,
            "language": {
                "id": language.id,
                "code": language.code,
                "name": language.name,
            },
            "results": {
                "knownCount": tallies.known_count,
                "unknownCount": tallies.unknown_count,
                "skippedCount": tallies.skipped_count,
                "total": tallies.total,
            },
            "unknownWords": [word.model_dump(by_alias=True) for word in tallies.unknown_words],
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def _get_flashcard(
        self, flashcard_id: Union[UUID, str, None], tallies: Optional[SessionTallies]
    ) -> Flashcard:
        if not flashcard_id or tallies is None:
            raise ValidationError("Flashcard ID and session data are required")
        if isinstance(flashcard_id, str):
            try:
                flashcard_id = UUID(flashcard_id)
            except ValueError:
                raise NotFoundError(f"Flashcard {flashcard_id} not found")
        flashcard = self.flashcards.get_by_id(flashcard_id)
        if flashcard is None:
            raise NotFoundError(f"Flashcard {flashcard_id} not found")
        return flashcard

    def _persist(
        self,
        flashcard: Flashcard,
        tallies: SessionTallies,
        analysis: Optional[AIAnalysis],
    ) -> StudySession:
        """Insert the session, upsert word analytics and stamp last_studied_at atomically."""
        try:
            study_session = self.study_sessions.create(
                flashcard_id=flashcard.id,
                known_count=tallies.known_count,
                unknown_count=tallies.unknown_count,
                skipped_count=tallies.skipped_count,
                ai_feedback=analysis.feedback_or_none if analysis else None,
            )
            if analysis is not None:
                self.reconciler.apply(flashcard.id, analysis.word_analysis)
            self.flashcards.mark_studied(flashcard.id, datetime.now(timezone.utc))
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to save study session for flashcard {flashcard.id}: {e}")
            raise PersistenceError(f"Failed to save study session: {e}") from e
        except Exception:
            self.session.rollback()
            raise

        logger.info(
            f"Saved study session {study_session.id} for flashcard {flashcard.id} "
            f"(known={tallies.known_count}, unknown={tallies.unknown_count}, "
            f"skipped={tallies.skipped_count})"
        )
        return study_session
