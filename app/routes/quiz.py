"""
Quiz endpoints: scoring, result submission and the leaderboard views.

Write failures are returned as errors; read failures degrade to an empty list
so the mini-app keeps rendering.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.core.personality_map import PERSONALITY_TYPES, QUESTIONS, compatible_types
from app.core.settings import settings
from app.exceptions import StoreUnavailableException
from app.schemas.quiz import (
    PersonalityTypeInfo,
    QuestionOption,
    QuizQuestion,
    QuizSubmission,
    ScoreRequest,
    ScoreResponse,
    SubmitResponse,
)
from app.services import leaderboard
from app.services.quiz_scoring import describe_result, score_quiz
from app.services.result_repository import submit_result
from app.store import get_redis

logger = logging.getLogger("app.quiz")

router = APIRouter(prefix="/api/quiz", tags=["Quiz"])

LEADERBOARD_MAX_LIMIT = 1000


@router.get("/questions", response_model=List[QuizQuestion])
def list_questions():
    return [
        QuizQuestion(
            id=qid,
            question=prompt,
            options=[QuestionOption(text=text, type=tag) for text, tag in options],
        )
        for qid, prompt, options in QUESTIONS
    ]


@router.get("/personality-types", response_model=List[PersonalityTypeInfo])
def list_personality_types():
    return [
        PersonalityTypeInfo(
            type=info.tag,
            title=info.title,
            tagline=info.tagline,
            description=info.description,
            compatible=sorted(compatible_types(info.tag)),
        )
        for info in PERSONALITY_TYPES.values()
    ]


@router.post("/score", response_model=ScoreResponse)
def score(payload: ScoreRequest):
    """Score a finished quiz without storing it."""
    return describe_result(score_quiz(payload.answers))


@router.post("/submit", response_model=SubmitResponse)
def submit(payload: QuizSubmission, redis=Depends(get_redis)):
    submit_result(redis, payload)
    return SubmitResponse(success=True)


@router.get("/leaderboard")
def get_leaderboard(
    limit: int = Query(settings.leaderboard_default_limit),
    redis=Depends(get_redis),
):
    # Out-of-range limits are clamped; 0 or less gives an empty list
    limit = min(limit, LEADERBOARD_MAX_LIMIT)
    try:
        return leaderboard.list_leaderboard(redis, limit)
    except StoreUnavailableException as e:
        logger.error(f"Leaderboard unavailable: {e.detail}")
        return []


@router.get("/user-types")
def get_user_types(
    personality_type: Optional[str] = Query(None, alias="type", description="Personality type to filter by"),
    compatible: Optional[str] = Query(None, description="Find types compatible with this personality"),
    user_fid: Optional[str] = Query(None, alias="userFid", description="Requesting user's Farcaster id, listed first"),
    redis=Depends(get_redis),
):
    try:
        return leaderboard.query_user_types(
            redis, personality_type=personality_type, compatible=compatible, user_fid=user_fid
        )
    except StoreUnavailableException as e:
        logger.error(f"User types unavailable: {e.detail}")
        return []
