"""HTTP handlers for hero operations.

Each handler method makes one call into the store (create makes two) and
turns the outcome into a status code. A StoreIOError always becomes a 500
with no body; not-found and conflict are ordinary outcomes.
"""

import logging

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from hero_api.dto import HeroCreateRequest, HeroSchema, HeroUpdateRequest
from hero_api.entities import HeroEntity
from hero_api.errors import StoreIOError
from hero_api.protocols import HeroStore


def _hero_response(hero: HeroEntity, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(HeroSchema.from_entity(hero)),
    )


def _heroes_response(heroes: list[HeroEntity]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=jsonable_encoder([HeroSchema.from_entity(h) for h in heroes]),
    )


class HeroHandler:
    """HTTP handlers for the hero resource.

    Holds no state besides its collaborators, so one instance serves all
    requests.

    Example:
        ```python
        from hero_api.handlers import HeroHandler
        from hero_api.repositories import InMemoryHeroRepository

        handler = HeroHandler(store=InMemoryHeroRepository())

        @router.get("/{hero_id}", response_model=HeroSchema)
        async def get_hero(hero_id: int):
            return await handler.get_hero(hero_id)
        ```
    """

    def __init__(self, store: HeroStore, logger: logging.Logger | None = None) -> None:
        """Initialize the hero handler.

        Args:
            store: The hero store to delegate to (required).
            logger: Where request and failure logs go. Defaults to this module's logger.
        """
        self._store = store
        self._log = logger or logging.getLogger(__name__)

    async def get_hero(self, hero_id: int) -> Response:
        """Handle GET /heroes/{id} requests.

        Returns:
            200 with the hero, 404 if unknown, 500 on store failure
        """
        self._log.info("GET /heroes/%s", hero_id, extra={"hero_id": hero_id})
        try:
            hero = self._store.fetch_by_id(hero_id)
        except StoreIOError:
            return self._server_error("get hero %s", hero_id)

        if hero is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return _hero_response(hero)

    async def list_heroes(self, api_version: str | None) -> Response:
        """Handle GET /heroes requests.

        Args:
            api_version: Value of the X-Api-Version header, logged only

        Returns:
            200 with every hero (an empty array when there are none),
            500 on store failure
        """
        self._log.info("GET /heroes (api version %s)", api_version, extra={"api_version": api_version})
        try:
            heroes = self._store.fetch_all()
        except StoreIOError:
            return self._server_error("list heroes")
        return _heroes_response(heroes)

    async def search_heroes(self, name: str) -> Response:
        """Handle GET /heroes/?name=... requests.

        Example: ``GET /heroes/?name=ma`` finds every hero whose name contains "ma".

        Returns:
            200 with the matching heroes (possibly empty), 500 on store failure
        """
        self._log.info("GET /heroes/?name=%s", name, extra={"query": name})
        try:
            heroes = self._store.find_by_name_substring(name)
        except StoreIOError:
            return self._server_error("search heroes for %r", name)
        return _heroes_response(heroes)

    async def create_hero(self, request: HeroCreateRequest) -> Response:
        """Handle POST /heroes requests.

        The new hero is refused with 409 when it conflicts with any stored
        hero (see HeroEntity.conflicts_with). The scan and the write are
        separate store calls and are not locked together.

        Returns:
            201 with the created hero, 409 with no body on conflict,
            500 if the store creates nothing or fails
        """
        hero = request.to_entity()
        self._log.info("POST /heroes %s", hero)
        try:
            existing = self._store.fetch_all()
            if any(hero.conflicts_with(other) for other in existing):
                self._log.warning("Refusing to create %s: conflicts with a stored hero", hero)
                return Response(status_code=status.HTTP_409_CONFLICT)

            created = self._store.create(hero)
        except StoreIOError:
            return self._server_error("create hero %s", hero)

        if created is None:
            self._log.error("Store did not create %s", hero)
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _hero_response(created, status.HTTP_201_CREATED)

    async def update_hero(self, request: HeroUpdateRequest) -> Response:
        """Handle PUT /heroes requests.

        Returns:
            200 with the submitted hero (not the store's copy), 404 if no hero
            has that id, 500 on store failure
        """
        hero = request.to_entity()
        self._log.info("PUT /heroes %s", hero)
        try:
            updated = self._store.update(hero)
        except StoreIOError:
            return self._server_error("update hero %s", hero)

        if updated is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return _hero_response(hero)

    async def delete_hero(self, hero_id: int) -> Response:
        """Handle DELETE /heroes/{id} requests.

        Returns:
            200 with no body if deleted, 404 if unknown, 500 on store failure
        """
        self._log.info("DELETE /heroes/%s", hero_id, extra={"hero_id": hero_id})
        try:
            deleted = self._store.delete_by_id(hero_id)
        except StoreIOError:
            return self._server_error("delete hero %s", hero_id)

        if not deleted:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return Response(status_code=status.HTTP_200_OK)

    async def health_check(self) -> bool:
        """Report whether the store is reachable."""
        return self._store.health_check()

    def _server_error(self, action: str, *args: object) -> Response:
        # Called from except blocks only; exc_info picks up the StoreIOError.
        self._log.error("Store failure while trying to " + action, *args, exc_info=True)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
