from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from lingocards.models.language import Language


class LanguageRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[Language]:
        stmt = select(Language).order_by(Language.name.asc())
        return list(self.session.scalars(stmt))

    def get_by_code(self, code: str) -> Optional[Language]:
        stmt = select(Language).where(Language.code == code)
        return self.session.scalar(stmt)

    def get_by_id(self, language_id: int) -> Optional[Language]:
        return self.session.get(Language, language_id)
