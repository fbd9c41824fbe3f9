from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from lingocards.models.flashcard import Flashcard


class FlashcardRepository:
    """Data access layer for flashcards.

    CRUD methods commit on their own. ``mark_studied`` does not: it is one
    step of the study-session transaction and the caller commits.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[Flashcard]:
        stmt = select(Flashcard).order_by(Flashcard.created_at.desc())
        return list(self.session.scalars(stmt))

    def get_by_id(self, flashcard_id: UUID) -> Optional[Flashcard]:
        return self.session.get(Flashcard, flashcard_id)

    def get_by_language(self, language_id: int) -> List[Flashcard]:
        stmt = (
            select(Flashcard)
            .where(Flashcard.language_id == language_id)
            .order_by(Flashcard.created_at.desc())
        )
        return list(self.session.scalars(stmt))

    def create(self, **fields) -> Flashcard:
        flashcard = Flashcard(**fields)
        self.session.add(flashcard)
        self.session.commit()
        self.session.refresh(flashcard)
        return flashcard

    def update(self, flashcard: Flashcard, **fields) -> Flashcard:
        for key, value in fields.items():
            setattr(flashcard, key, value)
        self.session.add(flashcard)
        self.session.commit()
        self.session.refresh(flashcard)
        return flashcard

    def delete(self, flashcard: Flashcard) -> None:
        self.session.delete(flashcard)
        self.session.commit()

    def mark_studied(self, flashcard_id: UUID, studied_at: datetime) -> None:
        # updated_at tracks edits only, so pin it to its current value
        stmt = (
            update(Flashcard)
            .where(Flashcard.id == flashcard_id)
            .values(last_studied_at=studied_at, updated_at=Flashcard.updated_at)
            .execution_options(synchronize_session="fetch")
        )
        self.session.execute(stmt)
