from typing import Annotated, Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from lingocards.config import Settings
from lingocards.db.database import Database
from lingocards.repositories.flashcards import FlashcardRepository
from lingocards.repositories.languages import LanguageRepository
from lingocards.repositories.study import StudySessionRepository, WordAnalyticsRepository
from lingocards.services.flashcards import FlashcardService
from lingocards.services.languages import LanguageService
from lingocards.services.study.sessions import StudySessionService
from lingocards.services.webhook.client import AnalysisWebhookClient


def get_settings_from_state(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_webhook_client(request: Request) -> AnalysisWebhookClient:
    return request.app.state.webhook_client


SettingsDep = Annotated[Settings, Depends(get_settings_from_state)]
DatabaseDep = Annotated[Database, Depends(get_database)]
WebhookClientDep = Annotated[AnalysisWebhookClient, Depends(get_webhook_client)]


def get_db_session(database: DatabaseDep) -> Generator[Session, None, None]:
    with database.get_session() as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db_session)]


def get_flashcard_service(session: SessionDep) -> FlashcardService:
    return FlashcardService(
        repo=FlashcardRepository(session),
        languages=LanguageRepository(session),
        study_sessions=StudySessionRepository(session),
        word_analytics=WordAnalyticsRepository(session),
    )


def get_language_service(session: SessionDep) -> LanguageService:
    return LanguageService(LanguageRepository(session))


def get_study_session_service(
    session: SessionDep, webhook_client: WebhookClientDep
) -> StudySessionService:
    return StudySessionService(session=session, webhook_client=webhook_client)


FlashcardServiceDep = Annotated[FlashcardService, Depends(get_flashcard_service)]
LanguageServiceDep = Annotated[LanguageService, Depends(get_language_service)]
StudySessionServiceDep = Annotated[StudySessionService, Depends(get_study_session_service)]
