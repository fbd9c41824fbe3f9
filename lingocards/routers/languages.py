import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from lingocards.dependencies import LanguageServiceDep
from lingocards.exceptions import NotFoundError, ValidationError
from lingocards.schemas.api.common import ApiResponse
from lingocards.schemas.api.languages import LanguageDTO

router = APIRouter(prefix="/languages", tags=["languages"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=ApiResponse[List[LanguageDTO]])
def list_languages(service: LanguageServiceDep):
    languages = service.list_all()
    return ApiResponse(data=[LanguageDTO.model_validate(lang) for lang in languages])


@router.get("/{code}", response_model=ApiResponse[LanguageDTO])
def get_language(code: str, service: LanguageServiceDep):
    try:
        language = service.get_by_code(code)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ApiResponse(data=LanguageDTO.model_validate(language))
