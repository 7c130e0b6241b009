"""Redis implementation of HeroStore.

All heroes live in a single Redis hash: field ``str(id)`` maps to the JSON
encoding of the hero. Any Redis failure is re-raised as StoreIOError.
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager

import redis

from hero_api.config import get_redis_client, settings
from hero_api.entities import HeroEntity
from hero_api.errors import StoreIOError


@contextmanager
def _redis_errors(action: str) -> Iterator[None]:
    try:
        yield
    except redis.exceptions.RedisError as e:
        raise StoreIOError(f"Redis {action} failed: {e}") from e


class RedisHeroRepository:
    """Redis hash-backed hero store.

    This class satisfies the HeroStore protocol through structural
    typing - no explicit inheritance needed.

    Writes rely on Redis primitives for atomicity:
    - create uses HSETNX, so a taken id is never overwritten
    - update runs in a WATCH/MULTI transaction and only writes existing ids
    - delete uses HDEL
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key: str | None = None,
    ) -> None:
        """Initialize the Redis hero repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
                          Must be created with ``decode_responses=True``.
            key: Name of the Redis hash holding the heroes.
        """
        self._client = redis_client or get_redis_client()
        self._key = key or settings.hero_store_key

    @classmethod
    def from_settings(cls, redis_client: redis.Redis | None = None) -> "RedisHeroRepository":
        """Factory method to create RedisHeroRepository from settings.

        Args:
            redis_client: Redis client instance. If None, built from REDIS_URL.

        Returns:
            Repository bound to the HERO_STORE_KEY hash
        """
        return cls(redis_client=redis_client)

    def fetch_by_id(self, hero_id: int) -> HeroEntity | None:
        with _redis_errors("HGET"):
            raw = self._client.hget(self._key, str(hero_id))
        if raw is None:
            return None
        return self._decode(raw)

    def fetch_all(self) -> list[HeroEntity]:
        with _redis_errors("HGETALL"):
            raw_heroes = self._client.hgetall(self._key)
        heroes = [self._decode(raw) for raw in raw_heroes.values()]
        heroes.sort(key=lambda h: h.id)
        return heroes

    def find_by_name_substring(self, text: str) -> list[HeroEntity]:
        return [hero for hero in self.fetch_all() if text in hero.name]

    def create(self, hero: HeroEntity) -> HeroEntity | None:
        with _redis_errors("HSETNX"):
            if hero.id is not None:
                created = self._client.hsetnx(self._key, str(hero.id), self._encode(hero))
                return hero if created else None

            hero_id = self._next_free_id(self._client.hkeys(self._key))
            while not self._client.hsetnx(self._key, str(hero_id), self._encode(hero.with_id(hero_id))):
                hero_id += 1
            return hero.with_id(hero_id)

    def _next_free_id(self, fields: list[str]) -> int:
        """Return the id one above the current maximum."""
        try:
            return max((int(field) for field in fields), default=0) + 1
        except ValueError as e:
            raise StoreIOError(f"Non-numeric hero id in {self._key!r}: {fields!r}") from e

    def update(self, hero: HeroEntity) -> HeroEntity | None:
        field = str(hero.id)
        payload = self._encode(hero)

        def _apply(pipe: redis.client.Pipeline) -> HeroEntity | None:
            if not pipe.hexists(self._key, field):
                return None
            pipe.multi()
            pipe.hset(self._key, field, payload)
            return hero

        with _redis_errors("update transaction"):
            return self._client.transaction(_apply, self._key, value_from_callable=True)

    def delete_by_id(self, hero_id: int) -> bool:
        with _redis_errors("HDEL"):
            result: int = self._client.hdel(self._key, str(hero_id))  # type: ignore[assignment]
        return result > 0

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.exceptions.RedisError:
            return False

    @staticmethod
    def _encode(hero: HeroEntity) -> str:
        return json.dumps({"id": hero.id, "name": hero.name})

    def _decode(self, raw: str | bytes) -> HeroEntity:
        try:
            data = json.loads(raw)
            return HeroEntity(id=int(data["id"]), name=str(data["name"]))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise StoreIOError(f"Unreadable hero record in {self._key!r}: {raw!r}") from e

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
