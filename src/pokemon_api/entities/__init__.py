"""Domain entities for internal representation.

These are pure frozen dataclasses used by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.
"""

from .pokemon import PokemonEntity
from .pokemon_page import PokemonPage

__all__ = ["PokemonEntity", "PokemonPage"]
