import logging
from typing import Optional

import redis

from app.core.settings import settings
from app.exceptions import StoreUnavailableException

logger = logging.getLogger("app.store")


def _create_client() -> Optional[redis.Redis]:
    """Build the shared client. Returns None when REDIS_URL is not set."""
    if not settings.redis_url:
        logger.warning("REDIS_URL not set; quiz results will not be stored")
        return None
    # No connection is opened here; the pool connects on first command.
    return redis.Redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_timeout,
    )


redis_client = _create_client()


def results_key(user_fid) -> str:
    return f"{settings.redis_key_prefix}results:{user_fid}"


def results_pattern() -> str:
    return f"{settings.redis_key_prefix}results:*"


def leaderboard_key() -> str:
    return f"{settings.redis_key_prefix}leaderboard"


def require_store(client: Optional[redis.Redis]) -> redis.Redis:
    if client is None:
        raise StoreUnavailableException("Redis is not configured")
    return client


async def check_store_health():
    """Check if Redis is accessible."""
    if redis_client is None:
        return {"status": "not_configured", "redis": "REDIS_URL not set"}
    try:
        redis_client.ping()
        logger.info("Redis health check: PASSED")
        return {"status": "healthy", "redis": "connected"}
    except redis.RedisError as e:
        logger.error(f"Redis health check: FAILED - {str(e)}")
        return {"status": "unhealthy", "redis": f"error: {str(e)}"}


def get_redis() -> Optional[redis.Redis]:
    return redis_client
