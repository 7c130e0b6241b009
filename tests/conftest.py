"""Shared fixtures for hero API tests."""

import os

# Keep tests on the in-memory store even if a developer .env selects Redis
os.environ.setdefault("HERO_STORE_BACKEND", "memory")

import pytest

from hero_api.entities import HeroEntity
from hero_api.errors import StoreIOError
from hero_api.repositories import InMemoryHeroRepository

SEED_HEROES = [
    HeroEntity(id=11, name="Wi-Fire"),
    HeroEntity(id=12, name="Galactic Agent"),
    HeroEntity(id=13, name="Ice Gladiator"),
    HeroEntity(id=14, name="Captain Coder"),
]


class FailingHeroStore:
    """Store whose every data call fails, as if the backend were down."""

    def _fail(self, *args, **kwargs):
        raise StoreIOError("storage unavailable")

    fetch_by_id = fetch_all = find_by_name_substring = _fail
    create = update = delete_by_id = _fail

    def health_check(self) -> bool:
        return False


class NoCreateHeroStore(InMemoryHeroRepository):
    """Store that accepts everything except new heroes."""

    def create(self, hero):
        return None


@pytest.fixture
def store():
    """In-memory store seeded with a few heroes."""
    return InMemoryHeroRepository(SEED_HEROES)


@pytest.fixture
def empty_store():
    return InMemoryHeroRepository()


@pytest.fixture
def failing_store():
    return FailingHeroStore()
