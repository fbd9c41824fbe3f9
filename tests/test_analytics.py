"""
Tests for the word analytics upsert and reconciler.
"""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lingocards.models import Flashcard, WordAnalytics
from lingocards.repositories.study import WordAnalyticsRepository
from lingocards.schemas.study import WordAnalysisEntry
from lingocards.services.study.analytics import WordAnalyticsReconciler


def test_first_mention_creates_row(db_session: Session, flashcard: Flashcard) -> None:
    repo = WordAnalyticsRepository(db_session)
    repo.record_wrong_answer(flashcard.id, "hello", ai_mnemonic="hell-o", difficulty_level=0.4)
    db_session.commit()

    row = repo.get(flashcard.id, "hello")
    assert row.wrong_count == 1
    assert row.correct_count == 0
    assert row.ai_mnemonic == "hell-o"
    assert row.difficulty_level == 0.4


def test_second_mention_increments_and_overwrites_supplied_fields(
    db_session: Session, flashcard: Flashcard
) -> None:
    repo = WordAnalyticsRepository(db_session)
    repo.record_wrong_answer(flashcard.id, "hello", ai_mnemonic="first", difficulty_level=0.4)
    repo.record_wrong_answer(flashcard.id, "hello", ai_mnemonic="second", difficulty_level=0.9)
    db_session.commit()

    row = repo.get(flashcard.id, "hello")
    assert row.wrong_count == 2
    assert row.ai_mnemonic == "second"
    assert row.difficulty_level == 0.9


def test_missing_fields_keep_previous_values(db_session: Session, flashcard: Flashcard) -> None:
    repo = WordAnalyticsRepository(db_session)
    repo.record_wrong_answer(flashcard.id, "hello", ai_mnemonic="keep me", difficulty_level=0.7)
    repo.record_wrong_answer(flashcard.id, "hello")
    db_session.commit()

    row = repo.get(flashcard.id, "hello")
    assert row.wrong_count == 2
    assert row.correct_count == 0
    assert row.ai_mnemonic == "keep me"
    assert row.difficulty_level == 0.7


def test_first_mention_without_details_stores_nulls(db_session: Session, flashcard: Flashcard) -> None:
    repo = WordAnalyticsRepository(db_session)
    repo.record_wrong_answer(flashcard.id, "thanks")
    db_session.commit()

    row = repo.get(flashcard.id, "thanks")
    assert row.ai_mnemonic is None
    assert row.difficulty_level is None


def test_reconciler_applies_each_entry(db_session: Session, flashcard: Flashcard) -> None:
    reconciler = WordAnalyticsReconciler(WordAnalyticsRepository(db_session))
    entries = [
        WordAnalysisEntry(word_key="hello", ai_mnemonic="m1"),
        WordAnalysisEntry(word_key="goodbye", difficulty_level=0.2),
        WordAnalysisEntry(word_key="hello"),
    ]

    applied = reconciler.apply(flashcard.id, entries)
    db_session.commit()

    assert applied == 3
    rows = {row.word_key: row for row in WordAnalyticsRepository(db_session).get_for_flashcard(flashcard.id)}
    assert rows["hello"].wrong_count == 2
    assert rows["hello"].ai_mnemonic == "m1"
    assert rows["goodbye"].wrong_count == 1
    total = db_session.scalar(select(func.count(WordAnalytics.id)))
    assert total == 2


def test_keys_are_scoped_per_flashcard(db_session: Session, flashcard: Flashcard) -> None:
    other = Flashcard(title="Other", words=[{"front": "a", "back": "b"}], language_id=flashcard.language_id)
    db_session.add(other)
    db_session.commit()

    repo = WordAnalyticsRepository(db_session)
    repo.record_wrong_answer(flashcard.id, "hello")
    repo.record_wrong_answer(other.id, "hello")
    db_session.commit()

    assert repo.get(flashcard.id, "hello").wrong_count == 1
    assert repo.get(other.id, "hello").wrong_count == 1
