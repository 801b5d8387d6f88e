"""Persistence of completed quizzes.

A result is written twice: a hash per user (``<prefix>results:<fid>``) and a
member of the leaderboard sorted set scored by the negated timestamp. The two
writes are independent. If the second fails the hash stays written and the
index is missing the entry; readers cope with either side being stale.
"""
import json
import logging
from typing import Any, Dict, Optional

import redis

from app.core.personality_map import PERSONALITY_TAGS, is_personality_type
from app.core.settings import settings
from app.exceptions import StoreUnavailableException, ValidationException
from app.schemas.quiz import QuizResult, QuizSubmission
from app.store import leaderboard_key, require_store, results_key
from app.utils.datetime import now_millis

logger = logging.getLogger("app.quiz.repository")


def build_result(submission: QuizSubmission) -> QuizResult:
    """Validate a submission and fill in the user and timestamp defaults."""
    if not submission.personality_type or submission.score is None:
        raise ValidationException("Missing required fields")
    if not is_personality_type(submission.personality_type):
        raise ValidationException(
            f"Unknown personalityType '{submission.personality_type}', "
            f"expected one of: {', '.join(PERSONALITY_TAGS)}"
        )

    return QuizResult(
        user_fid=submission.user_fid or settings.default_user_fid,
        personality_type=submission.personality_type,
        score=submission.score,
        timestamp=submission.timestamp or now_millis(),
    )


def _hash_fields(payload: Dict[str, Any]) -> Dict[str, str]:
    return {k: str(v) for k, v in payload.items()}


def submit_result(client: Optional[redis.Redis], submission: QuizSubmission) -> Dict[str, Any]:
    """Store a quiz result and index it on the leaderboard.

    Raises ``ValidationException`` for a bad submission and
    ``StoreUnavailableException`` when Redis cannot be reached. Each write is
    attempted once; nothing is rolled back.
    """
    result = build_result(submission)
    store = require_store(client)
    payload = result.model_dump(by_alias=True)

    try:
        store.hset(results_key(result.user_fid), mapping=_hash_fields(payload))
        store.zadd(leaderboard_key(), {json.dumps(payload): -result.timestamp})
    except redis.RedisError as e:
        logger.error(f"Failed to store quiz result for fid={result.user_fid}: {e}")
        raise StoreUnavailableException("Failed to store quiz result") from e

    logger.info(
        f"Stored quiz result fid={result.user_fid} type={result.personality_type} score={result.score}"
    )
    return payload
