from __future__ import annotations

from typing import Optional, Protocol

from redis import Redis

from app.client.db.memory import MemoryKeyValueStore


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class RedisKeyValueStore:
    def __init__(self, client: Redis) -> None:
        self._client = client

    def get(self, key: str) -> Optional[str]:
        return self._client.get(key)

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._client.setex(key, ttl_seconds, value)

    def delete(self, key: str) -> None:
        self._client.delete(key)


def build_key_value_store(redis_url: Optional[str]) -> KeyValueStore:
    if not redis_url:
        return MemoryKeyValueStore()
    return RedisKeyValueStore(Redis.from_url(redis_url, decode_responses=True))
