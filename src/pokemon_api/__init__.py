"""Pokemon API - CRUD service for Pokemon with paginated listing.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (PokemonStore)
    - repositories: Storage implementations (memory, SQLite, Redis)
    - services: Business logic (pagination)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from pokemon_api.repositories import InMemoryPokemonRepository
    from pokemon_api.services import PokemonService

    service = PokemonService.create(store=InMemoryPokemonRepository())
    service.create_pokemon("Pikachu", "Electric")
    ```

For HTTP API:
    ```python
    from pokemon_api.api.app import app, create_app
    ```
"""

__version__ = "0.1.0"

from pokemon_api.config import get_redis_client, settings
from pokemon_api.dto import CreatePokemonRequest
from pokemon_api.entities import PokemonEntity, PokemonPage
from pokemon_api.errors import InvalidPaginationError, PokemonApiError, PokemonCreateError
from pokemon_api.handlers import PokemonHandler
from pokemon_api.protocols import PokemonStore
from pokemon_api.repositories import (
    InMemoryPokemonRepository,
    RedisPokemonRepository,
    SqlitePokemonRepository,
)
from pokemon_api.services import PokemonService

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "PokemonStore",
    # Services (business logic)
    "PokemonService",
    # Handlers (HTTP)
    "PokemonHandler",
    # Repositories (data access)
    "InMemoryPokemonRepository",
    "RedisPokemonRepository",
    "SqlitePokemonRepository",
    # Entities (domain models)
    "PokemonEntity",
    "PokemonPage",
    # Errors
    "PokemonApiError",
    "InvalidPaginationError",
    "PokemonCreateError",
    # DTOs (API contracts)
    "CreatePokemonRequest",
]
