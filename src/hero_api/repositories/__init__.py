"""Repository layer for data access.

Implementations of the HeroStore protocol. They satisfy it through
structural typing, no inheritance needed.
"""

from hero_api.protocols import HeroStore

from .memory_repository import InMemoryHeroRepository
from .redis_repository import RedisHeroRepository

__all__ = [
    "HeroStore",
    "InMemoryHeroRepository",
    "RedisHeroRepository",
]
