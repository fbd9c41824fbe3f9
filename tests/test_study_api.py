"""
Tests for the save-session and analyze endpoints.
"""

import uuid

from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from lingocards.models import Flashcard, StudySession, WordAnalytics
from lingocards.services.webhook.client import WebhookResult

from tests.conftest import FakeWebhookClient


def test_save_session(client: TestClient, db_session: Session, flashcard: Flashcard) -> None:
    response = client.post(
        f"/api/v1/flashcards/{flashcard.id}/save-session",
        json={"knownCount": 2, "unknownCount": 1, "skippedCount": 0},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["knownCount"] == 2
    assert body["data"]["flashcardId"] == str(flashcard.id)
    assert body["data"]["aiFeedback"] is None

    db_session.expire_all()
    assert db_session.get(Flashcard, flashcard.id).last_studied_at is not None


def test_save_session_unknown_flashcard(client: TestClient, flashcard: Flashcard) -> None:
    response = client.post(
        f"/api/v1/flashcards/{uuid.uuid4()}/save-session",
        json={"knownCount": 1, "unknownCount": 0, "skippedCount": 0},
    )
    assert response.status_code == 404


def test_save_session_rejects_negative_counts(client: TestClient, flashcard: Flashcard) -> None:
    response = client.post(
        f"/api/v1/flashcards/{flashcard.id}/save-session",
        json={"knownCount": -1, "unknownCount": 0, "skippedCount": 0},
    )
    assert response.status_code == 422


def test_analyze_with_feedback(
    client: TestClient, db_session: Session, flashcard: Flashcard, webhook: FakeWebhookClient
) -> None:
    webhook.result = WebhookResult(
        body={
            "output": {
                "aiFeedback": "Nice work",
                "wordAnalysis": [{"wordKey": "hello", "aiMnemonic": "m", "difficultyLevel": 0.5}],
            }
        }
    )

    response = client.post(
        f"/api/v1/flashcards/{flashcard.id}/analyze",
        json={
            "knownCount": 2,
            "unknownCount": 1,
            "skippedCount": 0,
            "unknownWords": [{"front": "hello", "back": "merhaba"}],
        },
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["studySession"]["aiFeedback"] == "Nice work"
    assert data["aiAnalysis"] == {
        "aiFeedback": "Nice work",
        "wordAnalysis": [{"wordKey": "hello", "aiMnemonic": "m", "difficultyLevel": 0.5}],
    }
    row = db_session.scalar(select(WordAnalytics).where(WordAnalytics.word_key == "hello"))
    assert row.wrong_count == 1


def test_analyze_survives_unrecognized_response(
    client: TestClient, db_session: Session, flashcard: Flashcard, webhook: FakeWebhookClient
) -> None:
    webhook.result = WebhookResult(body={"randomField": 1})

    response = client.post(
        f"/api/v1/flashcards/{flashcard.id}/analyze",
        json={
            "knownCount": 0,
            "unknownCount": 1,
            "skippedCount": 2,
            "unknownWords": [{"front": "hello", "back": "merhaba"}],
        },
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["aiAnalysis"] is None
    assert data["studySession"]["aiFeedback"] is None
    assert len(list(db_session.scalars(select(StudySession)))) == 1


def test_analyze_without_unknown_words_skips_webhook(
    client: TestClient, flashcard: Flashcard, webhook: FakeWebhookClient
) -> None:
    response = client.post(
        f"/api/v1/flashcards/{flashcard.id}/analyze",
        json={"knownCount": 3, "unknownCount": 0, "skippedCount": 0, "unknownWords": []},
    )

    assert response.status_code == 200
    assert response.json()["data"]["aiAnalysis"] is None
    assert webhook.calls == []


def test_save_and_analyze_without_words_persist_the_same(
    client: TestClient, db_session: Session, flashcard: Flashcard, webhook: FakeWebhookClient
) -> None:
    counts = {"knownCount": 1, "unknownCount": 0, "skippedCount": 2}
    saved = client.post(f"/api/v1/flashcards/{flashcard.id}/save-session", json=counts).json()["data"]
    analyzed = client.post(
        f"/api/v1/flashcards/{flashcard.id}/analyze", json={**counts, "unknownWords": []}
    ).json()["data"]["studySession"]

    for key in ("knownCount", "unknownCount", "skippedCount", "aiFeedback", "flashcardId"):
        assert saved[key] == analyzed[key]
    assert webhook.calls == []


def test_session_history_lists_newest_first(client: TestClient, flashcard: Flashcard) -> None:
    for known in (1, 2):
        client.post(
            f"/api/v1/flashcards/{flashcard.id}/save-session",
            json={"knownCount": known, "unknownCount": 0, "skippedCount": 0},
        )

    response = client.get(f"/api/v1/flashcards/{flashcard.id}/sessions")

    assert response.status_code == 200
    assert [s["knownCount"] for s in response.json()["data"]] == [2, 1]
