"""HTTP handlers for Pokemon operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, envelopes, and error handling.
Store failures are logged here and reported to clients with generic messages.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse

from pokemon_api.dto import (
    CreatePokemonRequest,
    DataMessageResponse,
    ErrorResponse,
    HealthCheckResponse,
    PokemonCountResponse,
    PokemonItem,
    PokemonPageData,
    PokemonPageResponse,
    PokemonResponse,
)
from pokemon_api.entities import PokemonEntity, PokemonPage
from pokemon_api.errors import InvalidPaginationError
from pokemon_api.services import DEFAULT_LIMIT, DEFAULT_PAGE, PokemonService, parse_positive_int

logger = logging.getLogger(__name__)

CREATE_FAILED_MESSAGE = "Failed to create Pokemon."
DELETED_MESSAGE = "Pokemon deleted successfully."
INTERNAL_ERROR_MESSAGE = "Internal server error."


def _to_item(pokemon: PokemonEntity) -> PokemonItem:
    return PokemonItem(name=pokemon.name, type=pokemon.type)


def _to_page_data(page: PokemonPage) -> PokemonPageData:
    return PokemonPageData(
        items=[_to_item(p) for p in page.items],
        total=page.total,
        page=page.page,
        limit=page.limit,
        total_pages=page.total_pages,
    )


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(exclude_none=True),
    )


class PokemonHandler:
    """HTTP handlers for Pokemon operations.

    This handler delegates business logic to PokemonService
    and handles HTTP-specific concerns like:
    - Parsing raw pagination query values
    - Converting entities to DTOs
    - Setting appropriate status codes

    Example:
        ```python
        service = PokemonService.create(store=InMemoryPokemonRepository())
        handler = PokemonHandler(pokemon_service=service)

        @app.get("/pokemon")
        async def list_pokemon(page: str | None = None, limit: str | None = None):
            return await handler.list_pokemon(page, limit)
        ```
    """

    def __init__(self, pokemon_service: PokemonService) -> None:
        """Initialize the Pokemon handler.

        Args:
            pokemon_service: The Pokemon service for business logic (required).
        """
        self._pokemon = pokemon_service

    async def create_pokemon(self, request: CreatePokemonRequest) -> JSONResponse:
        """Handle POST /pokemon requests.

        Args:
            request: The validated create request DTO

        Returns:
            201 with the created Pokemon, or 500 if the store did not persist it
        """
        try:
            pokemon = self._pokemon.create_pokemon(name=request.name, type_=request.type)
        except Exception:
            logger.exception("Failed to create Pokemon %r", request.name)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=DataMessageResponse(data=CREATE_FAILED_MESSAGE).model_dump(),
            )

        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=PokemonResponse(data=_to_item(pokemon)).model_dump(),
        )

    async def list_pokemon(self, page: str | None, limit: str | None) -> JSONResponse:
        """Handle GET /pokemon requests.

        Args:
            page: Raw "page" query value, None when absent (defaults to 1)
            limit: Raw "limit" query value, None when absent (defaults to 10)

        Returns:
            200 with the requested page, 400 for an invalid page or limit
            (page is checked first), 500 if the store fails
        """
        try:
            page_number = parse_positive_int("page", page, DEFAULT_PAGE)
            limit_number = parse_positive_int("limit", limit, DEFAULT_LIMIT)
        except InvalidPaginationError as e:
            return _error(status.HTTP_400_BAD_REQUEST, str(e))

        try:
            result = self._pokemon.list_page(page=page_number, limit=limit_number)
        except Exception:
            logger.exception("Failed to list Pokemon (page=%s, limit=%s)", page_number, limit_number)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

        body = PokemonPageResponse(data=_to_page_data(result))
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=body.model_dump(by_alias=True),
        )

    async def count_pokemon(self) -> JSONResponse:
        """Handle GET /pokemon/count requests."""
        try:
            total = self._pokemon.count()
        except Exception:
            logger.exception("Failed to count Pokemon")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=PokemonCountResponse(total=total).model_dump(),
        )

    async def get_pokemon(self, name: str) -> JSONResponse:
        """Handle GET /pokemon/{name} requests.

        Returns:
            200 with the Pokemon, or 404 with ``{"data": null}``
        """
        try:
            pokemon = self._pokemon.get_by_name(name)
        except Exception:
            logger.exception("Failed to fetch Pokemon %r", name)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

        if pokemon is None:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=PokemonResponse(data=None).model_dump(),
            )

        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=PokemonResponse(data=_to_item(pokemon)).model_dump(),
        )

    async def delete_all(self) -> JSONResponse:
        """Handle DELETE /pokemon requests."""
        try:
            self._pokemon.delete_all()
        except Exception:
            logger.exception("Failed to delete Pokemon")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=DataMessageResponse(data=DELETED_MESSAGE).model_dump(),
        )

    async def health_check(self, backend: str) -> JSONResponse:
        """Handle GET /health requests.

        Args:
            backend: Name of the configured store backend, echoed back

        Returns:
            200 when the store answers, 503 otherwise
        """
        try:
            is_healthy = self._pokemon.is_healthy()
        except Exception:
            logger.exception("Store health check raised")
            is_healthy = False

        body = HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            store_healthy=is_healthy,
            backend=backend,
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK if is_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(),
        )
