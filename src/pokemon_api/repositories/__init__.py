"""Repository layer for data access.

This layer puts storage backends behind the PokemonStore protocol, so
the service never knows whether it is talking to a list, a SQLite table
or Redis.

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from pokemon_api.protocols import PokemonStore

from .memory_repository import InMemoryPokemonRepository
from .redis_repository import RedisPokemonRepository
from .sqlite_repository import SqlitePokemonRepository

__all__ = [
    "PokemonStore",
    "InMemoryPokemonRepository",
    "RedisPokemonRepository",
    "SqlitePokemonRepository",
]
