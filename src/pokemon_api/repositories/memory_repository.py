"""In-memory implementation of PokemonStore.

Keeps entities in a process-local list. Used by the test suite and as the
default backend for local runs; contents are lost on restart.
"""

import threading

from pokemon_api.entities import PokemonEntity

ORDERABLE_FIELDS = ("name", "type")


class InMemoryPokemonRepository:
    """List-backed implementation of the PokemonStore protocol.

    Entries keep insertion order, so ties under the requested ordering
    come back in the order they were created.
    """

    def __init__(self) -> None:
        self._items: list[PokemonEntity] = []
        self._lock = threading.Lock()

    @classmethod
    def create(cls) -> "InMemoryPokemonRepository":
        """Factory method for an empty repository."""
        return cls()

    def insert(self, pokemon: PokemonEntity) -> bool:
        with self._lock:
            self._items.append(pokemon)
        return True

    def find_and_count(
        self,
        skip: int,
        take: int,
        order_by: str = "name",
    ) -> tuple[list[PokemonEntity], int]:
        if order_by not in ORDERABLE_FIELDS:
            raise ValueError(f"Cannot order by {order_by!r}")

        with self._lock:
            snapshot = list(self._items)

        # sorted() is stable, ties keep insertion order
        ordered = sorted(snapshot, key=lambda p: getattr(p, order_by))
        return ordered[skip : skip + take], len(snapshot)

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def find_one(self, name: str) -> PokemonEntity | None:
        with self._lock:
            for pokemon in self._items:
                if pokemon.name == name:
                    return pokemon
        return None

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def health_check(self) -> bool:
        return True
