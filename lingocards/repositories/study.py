from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lingocards.models.study_session import StudySession
from lingocards.models.word_analytics import WordAnalytics


class StudySessionRepository:
    """Writes join the caller's transaction; nothing here commits."""

    def __init__(self, session: Session):
        self.session = session

    def create(
        self,
        flashcard_id: UUID,
        known_count: int,
        unknown_count: int,
        skipped_count: int,
        ai_feedback: Optional[str] = None,
    ) -> StudySession:
        study_session = StudySession(
            flashcard_id=flashcard_id,
            known_count=known_count,
            unknown_count=unknown_count,
            skipped_count=skipped_count,
            ai_feedback=ai_feedback,
        )
        self.session.add(study_session)
        self.session.flush()
        return study_session

    def get_for_flashcard(self, flashcard_id: UUID, limit: int = 50) -> List[StudySession]:
        stmt = (
            select(StudySession)
            .where(StudySession.flashcard_id == flashcard_id)
            .order_by(StudySession.created_at.desc(), StudySession.id.desc())
            .limit(limit)
        )
        return list(self.session.scalars(stmt))

    def count_for_flashcard(self, flashcard_id: UUID) -> int:
        stmt = select(func.count(StudySession.id)).where(StudySession.flashcard_id == flashcard_id)
        return self.session.scalar(stmt) or 0


class WordAnalyticsRepository:
    """Per-word counters, written with a single conflict-aware statement."""

    def __init__(self, session: Session):
        self.session = session
        self.table = WordAnalytics.__table__

    def _insert(self):
        dialect = self.session.get_bind().dialect.name
        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert
        elif dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert
        else:
            raise NotImplementedError(f"Word analytics upsert is not supported on {dialect}")
        return insert

    def record_wrong_answer(
        self,
        flashcard_id: UUID,
        word_key: str,
        ai_mnemonic: Optional[str] = None,
        difficulty_level: Optional[float] = None,
    ) -> None:
        """Insert with wrong_count=1, or increment wrong_count in place.

        Mnemonic and difficulty are overwritten only when supplied.
        """
        now = datetime.now(timezone.utc)
        insert = self._insert()
        stmt = insert(self.table).values(
            flashcard_id=flashcard_id,
            word_key=word_key,
            correct_count=0,
            wrong_count=1,
            ai_mnemonic=ai_mnemonic,
            difficulty_level=difficulty_level,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["flashcard_id", "word_key"],
            set_={
                "wrong_count": self.table.c.wrong_count + 1,
                "ai_mnemonic": func.coalesce(stmt.excluded.ai_mnemonic, self.table.c.ai_mnemonic),
                "difficulty_level": func.coalesce(
                    stmt.excluded.difficulty_level, self.table.c.difficulty_level
                ),
                "updated_at": now,
            },
        )
        self.session.execute(stmt)

    def get(self, flashcard_id: UUID, word_key: str) -> Optional[WordAnalytics]:
        stmt = (
            select(WordAnalytics)
            .where(
                WordAnalytics.flashcard_id == flashcard_id,
                WordAnalytics.word_key == word_key,
            )
            .execution_options(populate_existing=True)
        )
        return self.session.scalar(stmt)

    def get_for_flashcard(self, flashcard_id: UUID) -> List[WordAnalytics]:
        stmt = (
            select(WordAnalytics)
            .where(WordAnalytics.flashcard_id == flashcard_id)
            .order_by(WordAnalytics.wrong_count.desc(), WordAnalytics.word_key.asc())
            .execution_options(populate_existing=True)
        )
        return list(self.session.scalars(stmt))
