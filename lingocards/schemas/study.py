from typing import Any, List, Optional

from pydantic import Field, field_validator

from lingocards.schemas.base import CamelModel
from lingocards.schemas.flashcards import WordPair


class SessionTallies(CamelModel):
    """Final counts of a study run plus the words the user did not know."""

    known_count: int = Field(0, ge=0)
    unknown_count: int = Field(0, ge=0)
    skipped_count: int = Field(0, ge=0)
    unknown_words: List[WordPair] = Field(default_factory=list)

    @field_validator("known_count", "unknown_count", "skipped_count", mode="before")
    @classmethod
    def _null_count_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("unknown_words", mode="before")
    @classmethod
    def _null_words_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def total(self) -> int:
        return self.known_count + self.unknown_count + self.skipped_count


class WordAnalysisEntry(CamelModel):
    """Per-word output of the AI workflow. None means "not supplied"."""

    word_key: str = Field(..., min_length=1, max_length=255)
    ai_mnemonic: Optional[str] = None
    difficulty_level: Optional[float] = None

    @field_validator("word_key", mode="before")
    @classmethod
    def _stringify_key(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("ai_mnemonic", mode="before")
    @classmethod
    def _blank_mnemonic_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class AIAnalysis(CamelModel):
    """Canonical form of the AI workflow response."""

    ai_feedback: str = ""
    word_analysis: List[WordAnalysisEntry] = Field(default_factory=list)

    @field_validator("ai_feedback", mode="before")
    @classmethod
    def _feedback_as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if not isinstance(value, str):
            return str(value)
        return value

    @property
    def feedback_or_none(self) -> Optional[str]:
        return self.ai_feedback or None
