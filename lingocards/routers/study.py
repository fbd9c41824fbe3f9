import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from lingocards.dependencies import SettingsDep, StudySessionServiceDep
from lingocards.exceptions import NotFoundError, PersistenceError, ValidationError
from lingocards.schemas.api.common import ApiResponse
from lingocards.schemas.api.study import AnalyzeSessionResponse, StudySessionDTO
from lingocards.schemas.study import SessionTallies

router = APIRouter(prefix="/flashcards", tags=["study"])
logger = logging.getLogger(__name__)


@router.post("/{flashcard_id}/save-session", response_model=ApiResponse[StudySessionDTO])
def save_study_session(
    flashcard_id: UUID,
    tallies: SessionTallies,
    service: StudySessionServiceDep,
):
    """Save a finished study run without AI analysis."""
    try:
        study_session = service.save(flashcard_id, tallies)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError as e:
        logger.error(f"Failed to save study session: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to save study session",
        )
    return ApiResponse(data=StudySessionDTO.model_validate(study_session))


@router.post("/{flashcard_id}/analyze", response_model=ApiResponse[AnalyzeSessionResponse])
async def analyze_study_session(
    flashcard_id: UUID,
    tallies: SessionTallies,
    service: StudySessionServiceDep,
    settings: SettingsDep,
):
    """Save a finished study run and ask the AI workflow for feedback.

    The run is saved even when the workflow is down; ``aiAnalysis`` is then null.
    """
    try:
        result = await service.analyze(flashcard_id, tallies, settings.webhook_url)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError as e:
        logger.error(f"Failed to analyze study session: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to save study session",
        )

    return ApiResponse(
        data=AnalyzeSessionResponse(
            study_session=StudySessionDTO.model_validate(result.study_session),
            ai_analysis=result.ai_analysis,
        )
    )
