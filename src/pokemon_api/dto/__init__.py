"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CreatePokemonRequest
from .responses import (
    DataMessageResponse,
    ErrorResponse,
    HealthCheckResponse,
    PokemonCountResponse,
    PokemonItem,
    PokemonPageData,
    PokemonPageResponse,
    PokemonResponse,
)

__all__ = [
    "CreatePokemonRequest",
    "DataMessageResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "PokemonCountResponse",
    "PokemonItem",
    "PokemonPageData",
    "PokemonPageResponse",
    "PokemonResponse",
]
