"""Leaderboard reads: recency listing, type/compatibility filters and the
"requesting user first" reordering.

Entries come from the leaderboard sorted set (newest first). Members that are
not JSON objects are logged and dropped. When the index is empty the per-user
hashes are scanned instead and their raw field maps returned, newest first and
capped at the same limit, since the two write paths may have diverged.
"""
import json
import logging
from typing import Any, Dict, List, Optional

import redis

from app.core.personality_map import COMPATIBILITY, compatible_types
from app.core.settings import settings
from app.exceptions import DeserializationException, StoreUnavailableException
from app.store import leaderboard_key, require_store, results_pattern

logger = logging.getLogger("app.quiz.leaderboard")

Entry = Dict[str, Any]


def parse_member(member: Any) -> Entry:
    if not isinstance(member, str):
        raise DeserializationException(f"Leaderboard member is not a string: {type(member).__name__}")
    try:
        entry = json.loads(member)
    except ValueError as e:
        raise DeserializationException(f"Leaderboard member is not valid JSON: {e}") from e
    if not isinstance(entry, dict):
        raise DeserializationException("Leaderboard member is not a JSON object")
    return entry


def _parse_members(members: List[Any]) -> List[Entry]:
    entries: List[Entry] = []
    for member in members:
        try:
            entries.append(parse_member(member))
        except DeserializationException as e:
            logger.warning(f"Dropping leaderboard entry: {e.detail}")
    return entries


def _timestamp(fields: Entry) -> int:
    try:
        return int(fields.get("timestamp", 0))
    except (TypeError, ValueError):
        return 0


def _scan_result_hashes(store: redis.Redis, limit: int) -> List[Entry]:
    """Newest ``limit`` per-user hashes; SCAN itself has no order."""
    found = [
        fields
        for fields in (store.hgetall(key) for key in store.scan_iter(match=results_pattern()))
        if fields
    ]
    found.sort(key=_timestamp, reverse=True)
    return found[:limit]


def load_entries(client: Optional[redis.Redis], limit: int) -> List[Entry]:
    """Read up to ``limit`` entries, newest first, falling back to the hashes."""
    store = require_store(client)
    if limit <= 0:
        return []
    try:
        members = store.zrange(leaderboard_key(), 0, limit - 1)
        entries = _parse_members(members or [])
        if not entries:
            logger.info("Leaderboard index empty; scanning per-user result hashes")
            entries = _scan_result_hashes(store, limit)
    except redis.RedisError as e:
        logger.error(f"Failed to read leaderboard: {e}")
        raise StoreUnavailableException("Failed to fetch leaderboard data") from e
    return entries


def list_leaderboard(client: Optional[redis.Redis], limit: Optional[int] = None) -> List[Entry]:
    if limit is None:
        limit = settings.leaderboard_default_limit
    return load_entries(client, limit)


def _fid(entry: Entry) -> str:
    return str(entry.get("userFid"))


def filter_entries(
    entries: List[Entry],
    personality_type: Optional[str] = None,
    compatible: Optional[str] = None,
    user_fid: Optional[str] = None,
) -> List[Entry]:
    """Apply the compatible filter, else the exact type filter, else nothing.

    Both filters leave out the requesting user's own entries.
    """
    def not_requester(entry: Entry) -> bool:
        return not user_fid or _fid(entry) != user_fid

    if compatible and compatible in COMPATIBILITY:
        wanted = compatible_types(compatible)
        return [e for e in entries if e.get("personalityType") in wanted and not_requester(e)]
    if personality_type:
        return [e for e in entries if e.get("personalityType") == personality_type and not_requester(e)]
    return list(entries)


def prioritize_user(entries: List[Entry], filtered: List[Entry], user_fid: Optional[str]) -> List[Entry]:
    """Put the requesting user's newest entry first, whatever the filter said."""
    if not user_fid:
        return filtered
    own = next((e for e in entries if _fid(e) == user_fid), None)
    if own is None:
        return filtered
    return [own] + [e for e in filtered if _fid(e) != user_fid]


def query_user_types(
    client: Optional[redis.Redis],
    personality_type: Optional[str] = None,
    compatible: Optional[str] = None,
    user_fid: Optional[str] = None,
) -> List[Entry]:
    entries = load_entries(client, settings.user_types_scan_limit)
    filtered = filter_entries(entries, personality_type, compatible, user_fid)
    return prioritize_user(entries, filtered, user_fid)
