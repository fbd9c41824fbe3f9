from typing import List

from lingocards.exceptions import NotFoundError, ValidationError
from lingocards.models.language import Language
from lingocards.repositories.languages import LanguageRepository


class LanguageService:
    def __init__(self, repo: LanguageRepository):
        self.repo = repo

    def list_all(self) -> List[Language]:
        return self.repo.get_all()

    def get_by_code(self, code: str) -> Language:
        if not code or not code.strip():
            raise ValidationError("Language code is required")
        language = self.repo.get_by_code(code.strip())
        if language is None:
            raise NotFoundError("Language not found")
        return language
