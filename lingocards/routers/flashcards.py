import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from lingocards.dependencies import FlashcardServiceDep
from lingocards.exceptions import NotFoundError, ValidationError
from lingocards.schemas.api.common import ApiResponse
from lingocards.schemas.api.flashcards import FlashcardCreate, FlashcardDTO, FlashcardUpdate, WordAnalyticsDTO
from lingocards.schemas.api.study import StudySessionDTO

router = APIRouter(prefix="/flashcards", tags=["flashcards"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=ApiResponse[List[FlashcardDTO]])
def list_flashcards(service: FlashcardServiceDep):
    """All flashcards, newest first."""
    flashcards = service.list_all()
    return ApiResponse(data=[FlashcardDTO.model_validate(fc) for fc in flashcards])


@router.get("/language/{language_id}", response_model=ApiResponse[List[FlashcardDTO]])
def list_flashcards_by_language(language_id: int, service: FlashcardServiceDep):
    flashcards = service.list_by_language(language_id)
    return ApiResponse(data=[FlashcardDTO.model_validate(fc) for fc in flashcards])


@router.get("/{flashcard_id}", response_model=ApiResponse[FlashcardDTO])
def get_flashcard(flashcard_id: UUID, service: FlashcardServiceDep):
    try:
        flashcard = service.get(flashcard_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=FlashcardDTO.model_validate(flashcard))


@router.post("/", response_model=ApiResponse[FlashcardDTO], status_code=status.HTTP_201_CREATED)
def create_flashcard(payload: FlashcardCreate, service: FlashcardServiceDep):
    try:
        flashcard = service.create(payload)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ApiResponse(data=FlashcardDTO.model_validate(flashcard))


@router.put("/{flashcard_id}", response_model=ApiResponse[FlashcardDTO])
def update_flashcard(flashcard_id: UUID, payload: FlashcardUpdate, service: FlashcardServiceDep):
    try:
        flashcard = service.update(flashcard_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ApiResponse(data=FlashcardDTO.model_validate(flashcard))


@router.delete("/{flashcard_id}", response_model=ApiResponse[None])
def delete_flashcard(flashcard_id: UUID, service: FlashcardServiceDep):
    try:
        service.delete(flashcard_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(message="Flashcard deleted successfully")


@router.get("/{flashcard_id}/sessions", response_model=ApiResponse[List[StudySessionDTO]])
def list_study_sessions(
    flashcard_id: UUID,
    service: FlashcardServiceDep,
    limit: int = Query(50, ge=1, le=500),
):
    """Study history of a flashcard, newest first."""
    try:
        sessions = service.get_history(flashcard_id, limit=limit)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=[StudySessionDTO.model_validate(s) for s in sessions])


@router.get("/{flashcard_id}/analytics", response_model=ApiResponse[List[WordAnalyticsDTO]])
def list_word_analytics(flashcard_id: UUID, service: FlashcardServiceDep):
    try:
        rows = service.get_word_analytics(flashcard_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=[WordAnalyticsDTO.model_validate(row) for row in rows])
