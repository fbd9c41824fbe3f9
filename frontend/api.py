from typing import Any, Dict, List

import requests

from config import ANALYZE_TIMEOUT, API_BASE_URL, REQUEST_TIMEOUT


def _data(response: requests.Response) -> Any:
    response.raise_for_status()
    return response.json().get("data")


def list_languages() -> List[Dict[str, Any]]:
    response = requests.get(f"{API_BASE_URL}/languages/", timeout=REQUEST_TIMEOUT)
    return _data(response)


def list_flashcards(language_id: int) -> List[Dict[str, Any]]:
    response = requests.get(
        f"{API_BASE_URL}/flashcards/language/{language_id}",
        timeout=REQUEST_TIMEOUT,
    )
    return _data(response)


def save_session(flashcard_id: str, tallies: Dict[str, Any]) -> Dict[str, Any]:
    body = {key: tallies[key] for key in ("knownCount", "unknownCount", "skippedCount")}
    response = requests.post(
        f"{API_BASE_URL}/flashcards/{flashcard_id}/save-session",
        json=body,
        timeout=REQUEST_TIMEOUT,
    )
    return _data(response)


def analyze_session(flashcard_id: str, tallies: Dict[str, Any]) -> Dict[str, Any]:
    response = requests.post(
        f"{API_BASE_URL}/flashcards/{flashcard_id}/analyze",
        json=tallies,
        timeout=ANALYZE_TIMEOUT,
    )
    return _data(response)
