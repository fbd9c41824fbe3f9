"""Router modules for the LingoCards API."""

from . import flashcards, languages, ping, study

__all__ = ["flashcards", "languages", "ping", "study"]
