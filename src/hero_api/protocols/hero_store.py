"""Hero storage protocol.

Defines the interface for any backend that persists hero records.
Every data method may raise ``StoreIOError`` when the backend cannot
be reached or returns unreadable data.
"""

from typing import Protocol, runtime_checkable

from hero_api.entities import HeroEntity


@runtime_checkable
class HeroStore(Protocol):
    """Protocol for hero storage backends.

    Implementations serialise their own writes; callers do no locking.

    Example:
        ```python
        from hero_api.protocols import HeroStore

        store: HeroStore = InMemoryHeroRepository()
        store: HeroStore = RedisHeroRepository.from_settings()
        ```
    """

    def fetch_by_id(self, hero_id: int) -> HeroEntity | None:
        """Fetch a single hero.

        Args:
            hero_id: The id to look up

        Returns:
            The hero, or None if no hero has that id
        """
        ...

    def fetch_all(self) -> list[HeroEntity]:
        """Fetch every stored hero, ordered by id."""
        ...

    def find_by_name_substring(self, text: str) -> list[HeroEntity]:
        """Find heroes whose name contains ``text`` (case-sensitive).

        Args:
            text: Substring to look for; an empty string matches every hero

        Returns:
            Matching heroes ordered by id (may be empty)
        """
        ...

    def create(self, hero: HeroEntity) -> HeroEntity | None:
        """Persist a new hero.

        Args:
            hero: The hero to store. If its id is None the store assigns one.

        Returns:
            The stored hero, or None if it could not be created
            (for example the id is already taken)
        """
        ...

    def update(self, hero: HeroEntity) -> HeroEntity | None:
        """Replace the stored fields of the hero with ``hero.id``.

        Returns:
            The stored hero, or None if no hero has that id
        """
        ...

    def delete_by_id(self, hero_id: int) -> bool:
        """Delete a hero.

        Returns:
            True if deleted, False if no hero has that id
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
