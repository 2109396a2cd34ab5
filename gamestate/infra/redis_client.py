from __future__ import annotations

import os

import redis


def get_redis_url() -> str:
    return os.environ.get("REDIS_URL", "redis://localhost:6379/0")


def get_redis_namespace() -> str:
    return os.environ.get("GAMESTATE_REDIS_NAMESPACE", "default")


def create_redis(url: str | None = None) -> redis.Redis:
    """Connect to ``url`` (default: ``REDIS_URL``).

    Responses are decoded, since the value store only ever writes JSON text.
    """
    return redis.Redis.from_url(url or get_redis_url(), decode_responses=True)
