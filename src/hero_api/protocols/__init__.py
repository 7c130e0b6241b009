"""Protocol interfaces for swappable implementations.

Protocols use structural typing, so any store with matching methods
can back the handler (in-memory for tests, Redis in production).

Usage:
    ```python
    from hero_api.protocols import HeroStore

    store: HeroStore = InMemoryHeroRepository()
    store: HeroStore = RedisHeroRepository.from_settings()
    ```
"""

from .hero_store import HeroStore

__all__ = [
    "HeroStore",
]
