"""Study deck: the client-side reducer of a study run.

Cards are graded strictly in order. Each swipe or pass grades the card at
``current_index`` and moves on; grading the last card finishes the deck.
Finishing early counts the on-screen card and every card after it as
skipped, so at completion ``known + unknown + skipped == total``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from lingocards.exceptions import InvalidTransitionError
from lingocards.schemas.flashcards import WordPair
from lingocards.schemas.study import SessionTallies


class CardState(str, Enum):
    PENDING = "pending"
    KNOWN = "known"
    UNKNOWN = "unknown"
    SKIPPED = "skipped"


@dataclass
class CardStatus:
    word: WordPair
    index: int
    status: CardState = CardState.PENDING


class StudyDeck:
    def __init__(self, words: Iterable[WordPair]):
        self._words = tuple(words)
        self.replay()

    def replay(self) -> None:
        """Reset to the first card with empty tallies."""
        self._current_index = 0
        self._known: List[WordPair] = []
        self._unknown: List[WordPair] = []
        self._skipped: List[WordPair] = []
        self._statuses = [CardStatus(word=word, index=i) for i, word in enumerate(self._words)]
        self._completed = False

    @property
    def total(self) -> int:
        return len(self._words)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def current_card(self) -> Optional[WordPair]:
        if self._completed or self._current_index >= self.total:
            return None
        return self._words[self._current_index]

    @property
    def graded_count(self) -> int:
        return len(self._known) + len(self._unknown) + len(self._skipped)

    def statuses(self) -> List[CardStatus]:
        return list(self._statuses)

    def swipe_right(self, index: int) -> None:
        """The user knew the card."""
        self._grade(index, CardState.KNOWN)

    def swipe_left(self, index: int) -> None:
        """The user did not know the card."""
        self._grade(index, CardState.UNKNOWN)

    def pass_card(self, index: int) -> None:
        self._grade(index, CardState.SKIPPED)

    def swipe(self, index: int, direction: str) -> None:
        if direction == "right":
            self.swipe_right(index)
        elif direction == "left":
            self.swipe_left(index)
        else:
            raise InvalidTransitionError(f"Unknown swipe direction: {direction!r}")

    def finish(self, at_index: Optional[int] = None) -> SessionTallies:
        """End the run and skip every card that was not graded.

        ``at_index`` is given when a grading action reached the end of the
        deck; it must be the index right after the last graded card.
        """
        if self._completed:
            raise InvalidTransitionError("Study run is already finished")

        start = self._current_index if at_index is None else at_index
        if start != self._current_index:
            raise InvalidTransitionError(
                f"Cannot finish at card {start}; next ungraded card is {self._current_index}"
            )

        for status in self._statuses[start:]:
            status.status = CardState.SKIPPED
            self._skipped.append(status.word)

        self._current_index = self.total
        self._completed = True
        return self.tallies()

    def tallies(self) -> SessionTallies:
        if not self._completed:
            raise InvalidTransitionError("Tallies are only available once the run is finished")
        return SessionTallies(
            known_count=len(self._known),
            unknown_count=len(self._unknown),
            skipped_count=len(self._skipped),
            unknown_words=list(self._unknown),
        )

    def _grade(self, index: int, state: CardState) -> None:
        if self._completed:
            raise InvalidTransitionError("Study run is already finished")
        if index != self._current_index or index >= self.total:
            raise InvalidTransitionError(
                f"Card {index} cannot be graded; current card is {self._current_index} of {self.total}"
            )

        status = self._statuses[index]
        status.status = state
        if state is CardState.KNOWN:
            self._known.append(status.word)
        elif state is CardState.UNKNOWN:
            self._unknown.append(status.word)
        else:
            self._skipped.append(status.word)

        self._current_index = index + 1
        if self._current_index == self.total:
            self.finish(self._current_index)
