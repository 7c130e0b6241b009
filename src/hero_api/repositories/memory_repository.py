"""In-process implementation of HeroStore.

Keeps heroes in a dict guarded by a lock. Used for local runs
(HERO_STORE_BACKEND=memory) and in tests.
"""

import threading
from collections.abc import Iterable

from hero_api.entities import HeroEntity


class InMemoryHeroRepository:
    """Dict-backed hero store.

    This class satisfies the HeroStore protocol through structural
    typing. It never raises StoreIOError.
    """

    def __init__(self, heroes: Iterable[HeroEntity] | None = None) -> None:
        """Initialize the repository.

        Args:
            heroes: Optional heroes to seed the store with. Each must have an id.
        """
        self._lock = threading.Lock()
        self._heroes: dict[int, HeroEntity] = {}
        for hero in heroes or ():
            if hero.id is None:
                raise ValueError(f"Seed hero {hero.name!r} has no id")
            self._heroes[hero.id] = hero

    def fetch_by_id(self, hero_id: int) -> HeroEntity | None:
        with self._lock:
            return self._heroes.get(hero_id)

    def fetch_all(self) -> list[HeroEntity]:
        with self._lock:
            return self._sorted(self._heroes.values())

    def find_by_name_substring(self, text: str) -> list[HeroEntity]:
        with self._lock:
            return self._sorted(h for h in self._heroes.values() if text in h.name)

    def create(self, hero: HeroEntity) -> HeroEntity | None:
        with self._lock:
            if hero.id is None:
                hero = hero.with_id(max(self._heroes, default=0) + 1)
            elif hero.id in self._heroes:
                return None
            self._heroes[hero.id] = hero
            return hero

    def update(self, hero: HeroEntity) -> HeroEntity | None:
        with self._lock:
            if hero.id not in self._heroes:
                return None
            self._heroes[hero.id] = hero
            return hero

    def delete_by_id(self, hero_id: int) -> bool:
        with self._lock:
            return self._heroes.pop(hero_id, None) is not None

    def health_check(self) -> bool:
        return True

    @staticmethod
    def _sorted(heroes: Iterable[HeroEntity]) -> list[HeroEntity]:
        return sorted(heroes, key=lambda h: h.id)
