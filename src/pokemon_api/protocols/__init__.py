"""Protocol interfaces for swappable implementations.

Usage:
    ```python
    from pokemon_api.protocols import PokemonStore

    # Type hints work with any implementation
    store: PokemonStore = InMemoryPokemonRepository()
    store: PokemonStore = SqlitePokemonRepository.create()
    store: PokemonStore = RedisPokemonRepository.create()
    ```
"""

from .pokemon_store import PokemonStore

__all__ = [
    "PokemonStore",
]
