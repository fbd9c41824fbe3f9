from pydantic import Field

from lingocards.schemas.base import CamelModel


class LanguageDTO(CamelModel):
    id: int
    code: str = Field(..., description="Language code, e.g. 'en' or 'zh-Hans'")
    name: str
