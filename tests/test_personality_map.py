from app.core.personality_map import (
    COMPATIBILITY,
    PERSONALITY_TYPES,
    QUESTION_COUNT,
    QUESTIONS,
    compatible_types,
)


def test_compatible_types_table():
    assert compatible_types("builder") == {"connector", "visionary"}
    assert compatible_types("visionary") == {"builder", "analyst"}
    assert compatible_types("connector") == {"builder", "analyst"}
    assert compatible_types("analyst") == {"visionary", "connector"}


def test_compatibility_is_not_symmetric():
    assert "visionary" not in compatible_types("connector")
    assert "connector" not in compatible_types("visionary")
    assert "connector" in compatible_types("builder")


def test_compatible_types_unknown_is_empty():
    assert compatible_types("wizard") == set()
    assert compatible_types("") == set()


def test_compatible_types_returns_a_copy():
    types = compatible_types("builder")
    types.add("analyst")
    assert compatible_types("builder") == {"connector", "visionary"}


def test_questions_offer_every_type():
    assert QUESTION_COUNT == 5
    for _qid, _prompt, options in QUESTIONS:
        assert sorted(tag for _text, tag in options) == sorted(PERSONALITY_TYPES)


def test_every_type_has_compatibility_entry():
    assert set(COMPATIBILITY) == set(PERSONALITY_TYPES)
