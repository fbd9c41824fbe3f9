import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from lingocards.db.database import Base


class Flashcard(Base):
    __tablename__ = "flashcards"

    __table_args__ = (
        Index("ix_flashcards_language_created", "language_id", "created_at"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    # Ordered [{"front": ..., "back": ...}]; the order is the study order
    words = Column(JSON, nullable=False)
    language_id = Column(Integer, ForeignKey("languages.id"), nullable=False)

    # Written only when a study session is saved
    last_studied_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(
        timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    language = relationship("Language", back_populates="flashcards", lazy="joined")
    study_sessions = relationship(
        "StudySession",
        back_populates="flashcard",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    word_analytics = relationship(
        "WordAnalytics",
        back_populates="flashcard",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
