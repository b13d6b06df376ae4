from typing import Any

from fastapi import FastAPI, Query, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokemon_api import __version__
from pokemon_api.api.dependencies import HandlerDep, build_lifespan
from pokemon_api.config import settings
from pokemon_api.dto import (
    CreatePokemonRequest,
    DataMessageResponse,
    ErrorResponse,
    HealthCheckResponse,
    PokemonCountResponse,
    PokemonPageResponse,
    PokemonResponse,
)
from pokemon_api.logging_config import setup_logging
from pokemon_api.protocols import PokemonStore

API_TITLE = "Pokemon API"
API_DESCRIPTION = "CRUD service for Pokemon with paginated, name-ordered listing"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed request bodies with 400 instead of FastAPI's default 422."""
    body = ErrorResponse(message="Invalid request body.", errors=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def create_app(store: PokemonStore | None = None, backend: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Optional pre-built store to inject instead of building one
               from settings at startup.
        backend: Backend name override, defaults to settings.store_backend.

    Returns:
        A configured FastAPI instance
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        lifespan=build_lifespan(store=store, backend=backend),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": API_TITLE,
            "version": __version__,
            "description": API_DESCRIPTION,
            "endpoints": {
                "pokemon": "/pokemon",
                "count": "/pokemon/count",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        responses={503: {"model": HealthCheckResponse}},
    )
    async def health(request: Request, handler: HandlerDep) -> JSONResponse:
        """Health check endpoint."""
        return await handler.health_check(backend=request.app.state.store_backend)

    @app.post(
        "/pokemon",
        status_code=status.HTTP_201_CREATED,
        response_model=PokemonResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": DataMessageResponse}},
        tags=["Pokemon"],
        summary="Create a Pokemon",
    )
    async def create_pokemon(request: CreatePokemonRequest, handler: HandlerDep) -> JSONResponse:
        return await handler.create_pokemon(request)

    @app.get(
        "/pokemon",
        response_model=PokemonPageResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        tags=["Pokemon"],
        summary="List Pokemon ordered by name",
    )
    async def list_pokemon(
        handler: HandlerDep,
        page: str | None = Query(None, description="1-based page number (default 1)"),
        limit: str | None = Query(None, description="Page size (default 10)"),
    ) -> JSONResponse:
        return await handler.list_pokemon(page=page, limit=limit)

    # Registered before /pokemon/{name} so "count" is not read as a name
    @app.get(
        "/pokemon/count",
        response_model=PokemonCountResponse,
        responses={500: {"model": ErrorResponse}},
        tags=["Pokemon"],
        summary="Count all Pokemon",
    )
    async def count_pokemon(handler: HandlerDep) -> JSONResponse:
        return await handler.count_pokemon()

    @app.get(
        "/pokemon/{name}",
        response_model=PokemonResponse,
        responses={404: {"model": PokemonResponse}, 500: {"model": ErrorResponse}},
        tags=["Pokemon"],
        summary="Get a Pokemon by exact name",
    )
    async def get_pokemon(name: str, handler: HandlerDep) -> JSONResponse:
        return await handler.get_pokemon(name)

    @app.delete(
        "/pokemon",
        response_model=DataMessageResponse,
        responses={500: {"model": ErrorResponse}},
        tags=["Pokemon"],
        summary="Delete every Pokemon",
    )
    async def delete_pokemon(handler: HandlerDep) -> JSONResponse:
        return await handler.delete_all()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pokemon_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
