from lingocards.models.flashcard import Flashcard
from lingocards.models.language import Language
from lingocards.models.study_session import StudySession
from lingocards.models.word_analytics import WordAnalytics

__all__ = ["Flashcard", "Language", "StudySession", "WordAnalytics"]
