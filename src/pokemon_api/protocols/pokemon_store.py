"""Pokemon storage protocol.

Defines the interface for any backend that persists Pokemon.

Implementations in this package:
- In-memory list (default, used by tests)
- SQLite table
- Redis hashes with a lexicographic name index
"""

from typing import Protocol, runtime_checkable

from pokemon_api.entities import PokemonEntity


@runtime_checkable
class PokemonStore(Protocol):
    """Protocol for Pokemon storage backends.

    Any class implementing these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def insert(self, pokemon: PokemonEntity) -> bool:
        """Persist a new Pokemon.

        Args:
            pokemon: The entity to store

        Returns:
            True if a row was written, False otherwise
        """
        ...

    def find_and_count(
        self,
        skip: int,
        take: int,
        order_by: str = "name",
    ) -> tuple[list[PokemonEntity], int]:
        """Fetch one window of Pokemon together with the total count.

        Args:
            skip: Number of ordered entries to skip
            take: Maximum number of entries to return
            order_by: Field to sort ascending by ("name" or "type")

        Returns:
            Tuple (items, total) where total ignores skip/take
        """
        ...

    def count(self) -> int:
        """Count all stored Pokemon.

        Returns:
            Total number of entries
        """
        ...

    def find_one(self, name: str) -> PokemonEntity | None:
        """Find a Pokemon by exact name.

        Args:
            name: The name to match (case-sensitive)

        Returns:
            The first matching entity, or None
        """
        ...

    def clear(self) -> None:
        """Remove every stored Pokemon."""
        ...

    def health_check(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
