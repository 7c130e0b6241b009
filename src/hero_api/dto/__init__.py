"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import HeroCreateRequest, HeroUpdateRequest
from .responses import HealthCheckResponse, HeroSchema, ServiceInfoResponse

__all__ = [
    "HeroCreateRequest",
    "HeroUpdateRequest",
    "HeroSchema",
    "HealthCheckResponse",
    "ServiceInfoResponse",
]
