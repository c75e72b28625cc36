import json
import os

import redis
from dotenv import load_dotenv

from utils.app_logger import get_logger

load_dotenv()

REDIS_HOST = os.getenv("REDIS_HOST")
REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))
REDIS_DB = int(os.getenv("REDIS_DB", "0"))
DIRECTORY_CACHE_TTL = int(os.getenv("DIRECTORY_CACHE_TTL", "30"))

DIRECTORY_KEY_PREFIX = "directory:"

log = get_logger("cache")


def get_redis_client() -> redis.Redis | None:
    """Redis 연결. REDIS_HOST 가 없으면 캐시를 쓰지 않는다."""
    if not REDIS_HOST:
        return None
    return redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB, decode_responses=True)


def cache_get(client: redis.Redis | None, key: str):
    if client is None:
        return None
    try:
        raw = client.get(DIRECTORY_KEY_PREFIX + key)
    except redis.RedisError as e:
        log.warning("cache read failed for %s: %s", key, e)
        return None
    return json.loads(raw) if raw else None


def cache_set(client: redis.Redis | None, key: str, value, ttl: int = DIRECTORY_CACHE_TTL) -> None:
    if client is None:
        return
    try:
        client.setex(DIRECTORY_KEY_PREFIX + key, ttl, json.dumps(value))
    except redis.RedisError as e:
        log.warning("cache write failed for %s: %s", key, e)


def invalidate_directory(client: redis.Redis | None) -> None:
    """학교/교육과정이 바뀌면 디렉터리 캐시 전체를 비운다."""
    if client is None:
        return
    try:
        keys = list(client.scan_iter(match=DIRECTORY_KEY_PREFIX + "*"))
        if keys:
            client.delete(*keys)
    except redis.RedisError as e:
        log.warning("cache invalidation failed: %s", e)
