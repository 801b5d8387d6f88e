"""Canonical personality quiz definitions & compatibility table.

This module centralizes the PERSONALITY_TYPES catalogue, the QUESTIONS of the
quiz (each option tagged with the personality type it votes for) and the
COMPATIBILITY table, so scoring, the leaderboard filters and the share images
all read from a single authoritative source.

Validation helpers ensure integrity (5 questions, one option per type on every
question, every table keyed by a known type). Importing this module will raise
if invariants break.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

BUILDER = "builder"
VISIONARY = "visionary"
CONNECTOR = "connector"
ANALYST = "analyst"

PERSONALITY_TAGS: Tuple[str, ...] = (BUILDER, VISIONARY, CONNECTOR, ANALYST)

# Winner when nothing was answered
DEFAULT_TYPE = BUILDER


@dataclass(frozen=True)
class PersonalityType:
    tag: str
    title: str
    tagline: str
    description: str
    gradient: Tuple[str, str]


PERSONALITY_TYPES: Dict[str, PersonalityType] = {
    BUILDER: PersonalityType(
        tag=BUILDER,
        title="The Builder",
        tagline="Practical, hands-on, and loves creating things",
        description=(
            "You love creating things and seeing tangible results. You're practical, "
            "hands-on, and enjoy solving problems through building solutions."
        ),
        gradient=("#3b82f6", "#22d3ee"),
    ),
    VISIONARY: PersonalityType(
        tag=VISIONARY,
        title="The Visionary",
        tagline="Future-oriented, creative, and sees possibilities",
        description=(
            "You see possibilities where others don't. You're future-oriented, creative, "
            "and always thinking about what's next in the space."
        ),
        gradient=("#8b5cf6", "#f472b6"),
    ),
    CONNECTOR: PersonalityType(
        tag=CONNECTOR,
        title="The Connector",
        tagline="Social, empathetic, and brings people together",
        description=(
            "You thrive on bringing people together. You're social, empathetic, and excel "
            "at creating communities and meaningful relationships."
        ),
        gradient=("#22c55e", "#10b981"),
    ),
    ANALYST: PersonalityType(
        tag=ANALYST,
        title="The Analyst",
        tagline="Logical, detail-oriented, and research-driven",
        description=(
            "You love diving deep into data and understanding how things work. You're "
            "logical, detail-oriented, and make decisions based on thorough research."
        ),
        gradient=("#eab308", "#f59e0b"),
    ),
}

# Each question: (id, prompt, [(option text, tag), ...])
QUESTIONS: List[Tuple[int, str, List[Tuple[str, str]]]] = [
    (1, "When starting a new project, you prefer to:", [
        ("Jump right in and start building", BUILDER),
        ("Think about the big picture and long-term vision", VISIONARY),
        ("Discuss it with others and gather feedback", CONNECTOR),
        ("Research thoroughly and analyze all aspects", ANALYST),
    ]),
    (2, "In a team setting, you're most likely to:", [
        ("Take charge of implementation details", BUILDER),
        ("Share innovative ideas and possibilities", VISIONARY),
        ("Focus on team dynamics and making sure everyone is heard", CONNECTOR),
        ("Evaluate different approaches and identify potential issues", ANALYST),
    ]),
    (3, "When you hear about a new blockchain technology, you first:", [
        ("Try to build something with it right away", BUILDER),
        ("Imagine all the potential applications", VISIONARY),
        ("Share it with your network and discuss possibilities", CONNECTOR),
        ("Research how it works and its technical merits", ANALYST),
    ]),
    (4, "Your ideal Web3 project would be:", [
        ("A practical tool that solves a specific problem", BUILDER),
        ("Something revolutionary that changes how people think", VISIONARY),
        ("A platform that brings people together in new ways", CONNECTOR),
        ("A system with elegant design and technical excellence", ANALYST),
    ]),
    (5, "When faced with a challenge, you typically:", [
        ("Roll up your sleeves and work until you solve it", BUILDER),
        ("Step back and think of creative, unconventional solutions", VISIONARY),
        ("Reach out to others who might help or collaborate", CONNECTOR),
        ("Break it down into smaller parts and analyze each component", ANALYST),
    ]),
]

QUESTION_COUNT = len(QUESTIONS)

# Not symmetric: connector and visionary do not list each other.
# Kept as shipped until product confirms the intended pairs.
COMPATIBILITY: Dict[str, Tuple[str, ...]] = {
    BUILDER: (CONNECTOR, VISIONARY),
    VISIONARY: (BUILDER, ANALYST),
    CONNECTOR: (BUILDER, ANALYST),
    ANALYST: (VISIONARY, CONNECTOR),
}


def is_personality_type(value: object) -> bool:
    return isinstance(value, str) and value in PERSONALITY_TYPES


def compatible_types(personality_type: str) -> Set[str]:
    """Return the types considered compatible with ``personality_type`` (empty if unknown)."""
    return set(COMPATIBILITY.get(personality_type, ()))


def _validate_integrity() -> None:
    if set(PERSONALITY_TYPES) != set(PERSONALITY_TAGS):
        raise ValueError("PERSONALITY_TYPES must cover exactly the four tags")
    ids = [qid for qid, _prompt, _opts in QUESTIONS]
    if len(set(ids)) != len(ids):
        raise ValueError("Duplicate question ids detected")
    for qid, _prompt, options in QUESTIONS:
        tags = [tag for _text, tag in options]
        if sorted(tags) != sorted(PERSONALITY_TAGS):
            raise ValueError(f"Question {qid} must offer one option per type, got {tags}")
    for tag, partners in COMPATIBILITY.items():
        unknown = [p for p in (tag, *partners) if p not in PERSONALITY_TYPES]
        if unknown:
            raise ValueError(f"Unknown types in compatibility table: {unknown}")
    if set(COMPATIBILITY) != set(PERSONALITY_TAGS):
        raise ValueError("COMPATIBILITY must have an entry for every type")

_validate_integrity()

__all__ = [
    "PersonalityType",
    "PERSONALITY_TAGS",
    "PERSONALITY_TYPES",
    "DEFAULT_TYPE",
    "QUESTIONS",
    "QUESTION_COUNT",
    "COMPATIBILITY",
    "is_personality_type",
    "compatible_types",
]
