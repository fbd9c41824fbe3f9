from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from lingocards.schemas.base import CamelModel
from lingocards.schemas.flashcards import WordPair, WordPairInput


class FlashcardCreate(CamelModel):
    """Create payload. Field rules are enforced by the flashcard service."""

    title: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    words: Optional[List[WordPairInput]] = None
    language_id: Optional[int] = None


class FlashcardUpdate(CamelModel):
    """Partial update payload; omitted fields are left unchanged."""

    title: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    words: Optional[List[WordPairInput]] = None
    language_id: Optional[int] = None


class FlashcardDTO(CamelModel):
    id: UUID
    title: str
    description: Optional[str] = None
    notes: Optional[str] = None
    words: List[WordPair] = Field(default_factory=list)
    language_id: int
    last_studied_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class WordAnalyticsDTO(CamelModel):
    flashcard_id: UUID
    word_key: str
    correct_count: int
    wrong_count: int
    ai_mnemonic: Optional[str] = None
    difficulty_level: Optional[float] = None
    updated_at: Optional[datetime] = None
