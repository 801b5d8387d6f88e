import itertools

import pytest

from app.core.personality_map import PERSONALITY_TAGS, QUESTION_COUNT
from app.exceptions import InvalidInputException
from app.services.quiz_scoring import describe_result, score_answers, score_quiz, validate_answers


def test_score_answers_empty_defaults_to_builder():
    assert score_answers([]) == {"personalityType": "builder", "score": 0}


def test_score_answers_clear_majority():
    result = score_answers(["analyst", "analyst", "builder", "connector", "analyst"])
    assert result == {"personalityType": "analyst", "score": 3}


def test_score_answers_single_pair_wins():
    result = score_answers(["builder", "visionary", "connector", "analyst", "builder"])
    assert result == {"personalityType": "builder", "score": 2}


def test_score_answers_tie_goes_to_first_seen_type():
    # visionary and connector both reach 2; visionary was answered first
    result = score_answers(["visionary", "connector", "connector", "visionary", "analyst"])
    assert result == {"personalityType": "visionary", "score": 2}


def test_score_answers_all_different_picks_first():
    result = score_answers(["connector", "analyst", "builder", "visionary"])
    assert result == {"personalityType": "connector", "score": 1}


def test_score_answers_winner_is_always_maximal_and_earliest():
    for answers in itertools.product(PERSONALITY_TAGS, repeat=QUESTION_COUNT):
        result = score_answers(answers)
        counts = {tag: answers.count(tag) for tag in PERSONALITY_TAGS}
        best = max(counts.values())
        assert result["score"] == best
        assert counts[result["personalityType"]] == best
        earliest = next(tag for tag in answers if counts[tag] == best)
        assert result["personalityType"] == earliest


def test_validate_answers_ok():
    assert validate_answers(["builder"] * QUESTION_COUNT) == []


def test_validate_answers_empty():
    errors = validate_answers([])
    assert any("At least one" in e for e in errors)


def test_validate_answers_too_many():
    errors = validate_answers(["builder"] * (QUESTION_COUNT + 1))
    assert any("at most" in e for e in errors)


def test_validate_answers_unknown_type():
    errors = validate_answers(["builder", "wizard"])
    assert any("wizard" in e for e in errors)


def test_score_quiz_raises_on_invalid_input():
    with pytest.raises(InvalidInputException):
        score_quiz([])
    with pytest.raises(InvalidInputException):
        score_quiz(["analyst"] * 6)


def test_score_quiz_partial_answers_allowed():
    assert score_quiz(["connector", "connector"]) == {"personalityType": "connector", "score": 2}


def test_describe_result_adds_copy():
    described = describe_result({"personalityType": "visionary", "score": 3})
    assert described["title"] == "The Visionary"
    assert described["score"] == 3
    assert "possibilities" in described["description"]
