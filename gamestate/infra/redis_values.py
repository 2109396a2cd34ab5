from __future__ import annotations

import json
import re
from typing import Any

import redis

from gamestate.errors import ValueEncodingError
from gamestate.infra.redis_client import create_redis, get_redis_namespace

VALUES_KEY_PREFIX = "gamestate:values:"  # + {namespace}:{key}

_GLOB_CHARS = re.compile(r"([*?\[\]\\])")


def _escape_glob(text: str) -> str:
    return _GLOB_CHARS.sub(r"\\\1", text)


class RedisValueStore:
    """Value store kept in Redis so other processes can read a game's values.

    Values are stored as JSON, so only JSON-compatible values round-trip;
    tuples come back as lists. There is no atomic read-modify-write.

    Namespaces may not contain ``:``; otherwise one namespace could be a key
    prefix of another.
    """

    def __init__(self, *, r: redis.Redis, namespace: str | None = None):
        namespace = namespace or get_redis_namespace()
        if ":" in namespace:
            raise ValueError(f"Namespace must not contain ':': {namespace!r}")
        self._r = r
        self.namespace = namespace

    @classmethod
    def from_env(cls, *, namespace: str | None = None) -> "RedisValueStore":
        """Store on a fresh connection to ``REDIS_URL``."""
        return cls(r=create_redis(), namespace=namespace)

    def _key(self, key: str) -> str:
        return f"{VALUES_KEY_PREFIX}{self.namespace}:{key}"

    def get(self, key: str) -> tuple[Any, bool]:
        raw = self._r.get(self._key(key))
        if raw is None:
            return None, False
        try:
            return json.loads(raw), True
        except ValueError as e:
            raise ValueEncodingError(f"Value for '{key}' is not valid JSON: {e}") from e

    def set(self, key: str, value: Any) -> None:
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise ValueEncodingError(f"Value for '{key}' is not JSON encodable: {e}") from e
        self._r.set(self._key(key), raw)

    def delete(self, key: str) -> None:
        self._r.delete(self._key(key))

    def clear(self) -> None:
        pattern = f"{_escape_glob(VALUES_KEY_PREFIX + self.namespace)}:*"
        keys = list(self._r.scan_iter(match=pattern))
        if keys:
            self._r.delete(*keys)
