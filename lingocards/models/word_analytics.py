from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from lingocards.db.database import Base


class WordAnalytics(Base):
    __tablename__ = "word_analytics"

    __table_args__ = (
        UniqueConstraint("flashcard_id", "word_key", name="uq_word_analytics_flashcard_word_key"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    flashcard_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("flashcards.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    word_key = Column(String(255), nullable=False)

    # correct_count has no writer yet; only unknown words are reported back
    correct_count = Column(Integer, nullable=False, default=0)
    wrong_count = Column(Integer, nullable=False, default=0)
    ai_mnemonic = Column(Text, nullable=True)
    difficulty_level = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(
        timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    flashcard = relationship("Flashcard", back_populates="word_analytics")
