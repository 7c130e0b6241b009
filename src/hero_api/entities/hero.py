"""Hero domain entity."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class HeroEntity:
    """Domain entity for a hero record.

    Attributes:
        id: Unique identifier. None only for a create payload that
            leaves the id to the store.
        name: Display name
    """

    id: int | None
    name: str

    def conflicts_with(self, existing: "HeroEntity") -> bool:
        """Check whether this (new) hero clashes with an already stored one.

        A clash is an equal id, or this hero's name containing the
        existing hero's name. The containment is one-way: a new "Maximus"
        clashes with a stored "Max", a new "Max" does not clash with a
        stored "Maximus".

        Args:
            existing: A hero already in the store

        Returns:
            True if the two heroes conflict
        """
        return existing.name in self.name or self.id == existing.id

    def with_id(self, hero_id: int) -> "HeroEntity":
        """Return a copy carrying the given id."""
        return replace(self, id=hero_id)
