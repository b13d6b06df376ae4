"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - One store, service and handler built during lifespan startup
    - Dependency functions retrieve them from request.app.state
    - No per-request construction, no global mutable state
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from pokemon_api.config import settings
from pokemon_api.handlers import PokemonHandler
from pokemon_api.protocols import PokemonStore
from pokemon_api.repositories import (
    InMemoryPokemonRepository,
    RedisPokemonRepository,
    SqlitePokemonRepository,
)
from pokemon_api.services import PokemonService

logger = logging.getLogger(__name__)


def build_store(backend: str) -> PokemonStore:
    """Create the store for a configured backend name.

    Args:
        backend: One of "memory", "sqlite", "redis"

    Returns:
        A fresh store instance

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend == "memory":
        return InMemoryPokemonRepository.create()
    if backend == "sqlite":
        return SqlitePokemonRepository.create()
    if backend == "redis":
        return RedisPokemonRepository.create()
    raise ValueError(f"Unknown store backend: {backend!r}")


def get_handler(request: Request) -> PokemonHandler:
    """Dependency injection for PokemonHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "pokemon_handler", None)
    if handler is None:
        raise RuntimeError("PokemonHandler not initialized. Check lifespan setup.")
    return handler


def build_lifespan(
    store: PokemonStore | None = None,
    backend: str | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for the FastAPI app.

    Args:
        store: Pre-built store to inject (tests pass one). If None, one is
               built from ``backend`` at startup.
        backend: Backend name used for building and reporting. Defaults to
                 settings.store_backend.

    Returns:
        A lifespan callable suitable for ``FastAPI(lifespan=...)``
    """
    backend_name = backend or settings.store_backend

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize all layers once and store them in app.state.

        1. Store (data access) - injected or built from config
        2. Service (business logic) - app.state.pokemon_service
        3. Handler (HTTP endpoints) - app.state.pokemon_handler
        """
        pokemon_store = store if store is not None else build_store(backend_name)
        pokemon_service = PokemonService.create(store=pokemon_store)
        pokemon_handler = PokemonHandler(pokemon_service=pokemon_service)

        app.state.store = pokemon_store
        app.state.store_backend = backend_name
        app.state.pokemon_service = pokemon_service
        app.state.pokemon_handler = pokemon_handler

        logger.info("Pokemon service initialized with %s store", backend_name)
        if not pokemon_service.is_healthy():
            logger.warning("Store %s is not reachable yet", backend_name)

        yield

        del app.state.pokemon_handler
        del app.state.pokemon_service
        del app.state.store_backend
        del app.state.store

        # Only close what we opened ourselves
        close = getattr(pokemon_store, "close", None)
        if store is None and callable(close):
            close()
        logger.info("Pokemon service shut down")

    return lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[PokemonHandler, Depends(get_handler)]
