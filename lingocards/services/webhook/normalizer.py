"""Normalize the analysis workflow's response into :class:`AIAnalysis`.

The workflow answers in one of three shapes depending on how its last node
is wired:

1. ``{"output": {"aiFeedback": ..., "wordAnalysis": [...]}}``
2. ``[{"response": {"output": {...}}}]``
3. ``{"aiFeedback": ..., "wordAnalysis": [...]}``

Matchers run in that order and the first one that finds an object wins;
an empty or non-object value falls through to the next. Anything else is
"no analysis"; nothing in this module raises on bad input.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from lingocards.schemas.study import AIAnalysis, WordAnalysisEntry

logger = logging.getLogger(__name__)

FEEDBACK_FIELD = "aiFeedback"
WORDS_FIELD = "wordAnalysis"


def _match_output(body: Any) -> Optional[Any]:
    if isinstance(body, Mapping):
        return body.get("output")
    return None


def _match_wrapped_list(body: Any) -> Optional[Any]:
    if isinstance(body, Sequence) and not isinstance(body, (str, bytes)) and body:
        first = body[0]
        if isinstance(first, Mapping) and isinstance(first.get("response"), Mapping):
            return first["response"].get("output")
    return None


def _match_direct(body: Any) -> Optional[Any]:
    if isinstance(body, Mapping) and (FEEDBACK_FIELD in body or WORDS_FIELD in body):
        return body
    return None


MATCHERS: List[Callable[[Any], Optional[Any]]] = [
    _match_output,
    _match_wrapped_list,
    _match_direct,
]


def extract_analysis_object(body: Any) -> Optional[Mapping]:
    """Return the nested object holding the analysis, or None."""
    for matcher in MATCHERS:
        found = matcher(body)
        if isinstance(found, Mapping):
            return found
        if found:
            logger.warning(f"{matcher.__name__} found a non-object value: {type(found).__name__}")
    return None


def _word_entries(raw: Any) -> List[WordAnalysisEntry]:
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning(f"Ignoring {WORDS_FIELD} of type {type(raw).__name__}")
        return []

    entries = []
    for item in raw:
        try:
            entries.append(WordAnalysisEntry.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Dropping word analysis entry {str(item)[:120]}: {e.error_count()} error(s)")
    return entries


def normalize_analysis(body: Any) -> Optional[AIAnalysis]:
    """Map any known response shape to AIAnalysis; None when unrecognized."""
    found = extract_analysis_object(body)
    if found is None:
        return None
    return AIAnalysis(
        ai_feedback=found.get(FEEDBACK_FIELD),
        word_analysis=_word_entries(found.get(WORDS_FIELD)),
    )
