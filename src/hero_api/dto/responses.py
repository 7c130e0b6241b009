"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from hero_api.entities import HeroEntity


class HeroSchema(BaseModel):
    """Wire representation of a hero."""

    id: int = Field(..., description="Unique hero id")
    name: str = Field(..., description="Display name of the hero")

    @classmethod
    def from_entity(cls, hero: HeroEntity) -> "HeroSchema":
        return cls(id=hero.id, name=hero.name)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the hero store is reachable")


class ServiceInfoResponse(BaseModel):
    """Response DTO for the root endpoint."""

    name: str
    version: str
    store_backend: str
    endpoints: dict[str, str] = Field(default_factory=dict)
