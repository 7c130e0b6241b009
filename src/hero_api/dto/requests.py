"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from hero_api.entities import HeroEntity


class HeroCreateRequest(BaseModel):
    """Request DTO for creating a hero.

    The id may be left out, in which case the store assigns one.
    """

    id: int | None = Field(None, description="Client-chosen id (assigned by the store if null)")
    name: str = Field(..., description="Display name of the hero", min_length=1)

    def to_entity(self) -> HeroEntity:
        return HeroEntity(id=self.id, name=self.name)


class HeroUpdateRequest(BaseModel):
    """Request DTO for updating an existing hero, located by id."""

    id: int = Field(..., description="Id of the hero to update")
    name: str = Field(..., description="New display name", min_length=1)

    def to_entity(self) -> HeroEntity:
        return HeroEntity(id=self.id, name=self.name)
