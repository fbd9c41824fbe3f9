from typing import Optional

from pydantic import ConfigDict

from lingocards.schemas.base import CamelModel


class WordPair(CamelModel):
    """One front/back translation unit. Emptiness is checked by the flashcard use cases."""

    model_config = ConfigDict(frozen=True)

    front: str
    back: str


class WordPairInput(CamelModel):
    """Word pair as submitted by a client, before validation."""

    front: Optional[str] = None
    back: Optional[str] = None
