from typing import Any, Dict, Generator, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lingocards.config import Settings
from lingocards.db.database import Database
from lingocards.dependencies import get_database, get_settings_from_state, get_webhook_client
from lingocards.main import app
from lingocards.models import Flashcard, Language
from lingocards.repositories.languages import LanguageRepository
from lingocards.services.webhook.client import WebhookResult

WEBHOOK_URL = "http://n8n.test/webhook/analyze"

# Same rows as the initial Alembic migration
LANGUAGES = [
    {"code": "tr", "name": "Türkçe"},
    {"code": "en", "name": "İngilizce"},
    {"code": "zh-Hans", "name": "Çince (Basitleştirilmiş)"},
]

WORDS = [
    {"front": "hello", "back": "merhaba"},
    {"front": "thanks", "back": "teşekkürler"},
    {"front": "goodbye", "back": "hoşça kal"},
]


def seed_languages(session: Session) -> None:
    session.add_all([Language(**language) for language in LANGUAGES])
    session.commit()


class FakeWebhookClient:
    """Stands in for AnalysisWebhookClient; records calls, returns a canned result."""

    def __init__(self, result: Optional[WebhookResult] = None):
        self.result = result or WebhookResult(body={"output": {"aiFeedback": "", "wordAnalysis": []}})
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def post(self, url: str, payload: Dict[str, Any]) -> WebhookResult:
        self.calls.append((url, payload))
        return self.result

    def close(self) -> None:
        pass


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """Transient in-memory SQLite database with all tables."""
    database = Database("sqlite://")
    database.create_tables()
    yield database
    database.teardown()


@pytest.fixture
def db_session(database: Database) -> Generator[Session, None, None]:
    with database.get_session() as session:
        seed_languages(session)
        yield session


@pytest.fixture
def language(db_session: Session) -> Language:
    return LanguageRepository(db_session).get_by_code("en")


@pytest.fixture
def flashcard(db_session: Session, language: Language) -> Flashcard:
    flashcard = Flashcard(title="Greetings", words=list(WORDS), language_id=language.id)
    db_session.add(flashcard)
    db_session.commit()
    return flashcard


@pytest.fixture
def webhook() -> FakeWebhookClient:
    return FakeWebhookClient()


@pytest.fixture
def settings() -> Settings:
    return Settings(webhook={"url": WEBHOOK_URL})


@pytest.fixture
def client(
    database: Database,
    db_session: Session,
    settings: Settings,
    webhook: FakeWebhookClient,
) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_database] = lambda: database
    app.dependency_overrides[get_settings_from_state] = lambda: settings
    app.dependency_overrides[get_webhook_client] = lambda: webhook
    yield TestClient(app)
    app.dependency_overrides.clear()
