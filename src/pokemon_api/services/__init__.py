"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .pokemon_service import DEFAULT_LIMIT, DEFAULT_PAGE, PokemonService, parse_positive_int

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "PokemonService",
    "parse_positive_int",
]
