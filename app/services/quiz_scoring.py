"""Personality quiz scoring logic.

Single source of truth: tags and question count come from
``app.core.personality_map``. Only tag frequency matters; question order is
used solely to break ties.
"""
from typing import Dict, List, Sequence, Union

from app.core.personality_map import (
    DEFAULT_TYPE,
    PERSONALITY_TYPES,
    QUESTION_COUNT,
    is_personality_type,
)
from app.exceptions import InvalidInputException


def validate_answers(answers: Sequence[str]) -> List[str]:
    """Return list of validation error messages (empty if valid)."""
    errors: List[str] = []
    if len(answers) < 1:
        errors.append("At least one answer is required")
    elif len(answers) > QUESTION_COUNT:
        errors.append(f"Expected at most {QUESTION_COUNT} answers, got {len(answers)}")
    unknown = sorted({str(a) for a in answers if not is_personality_type(a)})
    if unknown:
        errors.append(f"Unknown personality types: {', '.join(unknown)}")
    return errors


def score_answers(answers: Sequence[str]) -> Dict[str, Union[str, int]]:
    """Pick the dominant personality type.

    Counts are kept in first-seen order and a tag only takes the lead with a
    strictly higher count, so a tie goes to the tag that appeared first.
    An empty sequence scores ``builder`` with 0.
    """
    counts: Dict[str, int] = {}
    for tag in answers:
        counts[tag] = counts.get(tag, 0) + 1

    dominant = DEFAULT_TYPE
    max_count = 0
    for tag, count in counts.items():
        if count > max_count:
            max_count = count
            dominant = tag

    return {"personalityType": dominant, "score": max_count}


def score_quiz(answers: Sequence[str]) -> Dict[str, Union[str, int]]:
    errors = validate_answers(answers)
    if errors:
        raise InvalidInputException("; ".join(errors))
    return score_answers(answers)


def describe_result(result: Dict[str, Union[str, int]]) -> Dict[str, Union[str, int]]:
    """Attach display copy for the winning type."""
    info = PERSONALITY_TYPES[result["personalityType"]]
    return {
        **result,
        "title": info.title,
        "description": info.description,
    }
