"""Heroes API - CRUD REST service for hero records.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (HeroStore)
    - repositories: Data access implementations (in-memory, Redis)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from hero_api.handlers import HeroHandler
    from hero_api.repositories import InMemoryHeroRepository

    handler = HeroHandler(store=InMemoryHeroRepository())
    ```

For HTTP API:
    ```python
    from hero_api.api.app import app, create_app
    ```
"""

__version__ = "0.1.0"

from hero_api.config import get_redis_client, settings
from hero_api.dto import HeroCreateRequest, HeroSchema, HeroUpdateRequest
from hero_api.entities import HeroEntity
from hero_api.errors import StoreIOError
from hero_api.handlers import HeroHandler
from hero_api.protocols import HeroStore
from hero_api.repositories import InMemoryHeroRepository, RedisHeroRepository

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_redis_client",
    # Errors
    "StoreIOError",
    # Protocols (interfaces)
    "HeroStore",
    # Handlers (HTTP)
    "HeroHandler",
    # Repositories (data access)
    "InMemoryHeroRepository",
    "RedisHeroRepository",
    # Entities (domain models)
    "HeroEntity",
    # DTOs (API contracts)
    "HeroCreateRequest",
    "HeroUpdateRequest",
    "HeroSchema",
]
