from typing import Annotated

from fastapi import APIRouter, FastAPI, Header, HTTPException, Query, Response, status
from fastapi.middleware.cors import CORSMiddleware

from hero_api import __version__
from hero_api.api.dependencies import HandlerDep, make_lifespan
from hero_api.config import settings
from hero_api.dto import (
    HealthCheckResponse,
    HeroCreateRequest,
    HeroSchema,
    HeroUpdateRequest,
    ServiceInfoResponse,
)
from hero_api.protocols import HeroStore

router = APIRouter(prefix="/heroes", tags=["heroes"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "No hero with that id"}}
SERVER_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Hero store failure"}}


@router.get("/{hero_id}", response_model=HeroSchema, responses={**NOT_FOUND, **SERVER_ERROR})
async def get_hero(hero_id: int, handler: HandlerDep) -> Response:
    """Get a hero by id."""
    return await handler.get_hero(hero_id)


@router.get("", response_model=list[HeroSchema], responses=SERVER_ERROR)
async def list_heroes(
    handler: HandlerDep,
    api_version: Annotated[str, Header(alias="X-Api-Version")],
) -> Response:
    """List every hero."""
    return await handler.list_heroes(api_version)


@router.get("/", response_model=list[HeroSchema], responses=SERVER_ERROR)
async def search_heroes(name: Annotated[str, Query()], handler: HandlerDep) -> Response:
    """
    Find heroes whose name contains the given text.

    Example: ``GET /heroes/?name=ma``
    """
    return await handler.search_heroes(name)


@router.post(
    "",
    response_model=HeroSchema,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_409_CONFLICT: {"description": "Id taken or name overlaps a stored hero"},
        **SERVER_ERROR,
    },
)
async def create_hero(request: HeroCreateRequest, handler: HandlerDep) -> Response:
    """Create a hero."""
    return await handler.create_hero(request)


@router.put("", response_model=HeroSchema, responses={**NOT_FOUND, **SERVER_ERROR})
async def update_hero(request: HeroUpdateRequest, handler: HandlerDep) -> Response:
    """Update the hero with the id given in the body."""
    return await handler.update_hero(request)


@router.delete("/{hero_id}", responses={**NOT_FOUND, **SERVER_ERROR})
async def delete_hero(hero_id: int, handler: HandlerDep) -> Response:
    """Delete a hero by id."""
    return await handler.delete_hero(hero_id)


def create_app(store: HeroStore | None = None) -> FastAPI:
    """
    Build the Heroes API application.

    Args:
        store: Hero store to serve from. If None, the lifespan builds one from settings.

    Returns:
        Configured FastAPI app.
    """
    app = FastAPI(
        title="Heroes API",
        description="CRUD API for heroes",
        version=__version__,
        lifespan=make_lifespan(store),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_model=ServiceInfoResponse)
    async def root() -> ServiceInfoResponse:
        """Root endpoint with API information."""
        return ServiceInfoResponse(
            name="Heroes API",
            version=__version__,
            store_backend=settings.store_backend,
            endpoints={
                "heroes": "/heroes",
                "health": "/health",
                "docs": "/docs",
            },
        )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        if not await handler.health_check():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Hero store is not reachable",
            )
        return HealthCheckResponse(status="healthy", store_healthy=True)

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hero_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
