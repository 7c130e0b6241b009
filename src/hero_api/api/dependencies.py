"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Store and handler stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - No global mutable state
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from hero_api.config import settings
from hero_api.handlers import HeroHandler
from hero_api.observability import setup_logging
from hero_api.protocols import HeroStore
from hero_api.repositories import InMemoryHeroRepository, RedisHeroRepository

logger = logging.getLogger(__name__)


def build_store() -> HeroStore:
    """Create the hero store selected by HERO_STORE_BACKEND.

    Returns:
        A RedisHeroRepository for ``redis``, an empty InMemoryHeroRepository otherwise
    """
    if settings.uses_redis:
        return RedisHeroRepository.from_settings()
    return InMemoryHeroRepository()


def get_handler(request: Request) -> HeroHandler:
    """Dependency injection for HeroHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The HeroHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "hero_handler", None)
    if handler is None:
        raise RuntimeError("HeroHandler not initialized. Check lifespan setup.")
    return handler


def make_lifespan(
    store: HeroStore | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for the app.

    Args:
        store: Store to serve from. If None, one is built from settings on startup.

    Returns:
        A lifespan function for ``FastAPI(lifespan=...)``
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(settings.log_level, settings.log_format)

        hero_store = store if store is not None else build_store()
        app.state.hero_store = hero_store
        app.state.hero_handler = HeroHandler(
            store=hero_store,
            logger=logging.getLogger("hero_api.requests"),
        )

        logger.info("Hero store initialized: %s", type(hero_store).__name__)
        if not hero_store.health_check():
            logger.warning("Hero store is not reachable, requests will answer 500 until it is")

        yield

        del app.state.hero_handler
        del app.state.hero_store
        logger.info("Hero API shut down")

    return lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[HeroHandler, Depends(get_handler)]
