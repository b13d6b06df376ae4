"""Pokemon service for core business logic.

This service owns pagination arithmetic and delegates every data
operation to a PokemonStore.
"""

import logging
import re

from pokemon_api.entities import PokemonEntity, PokemonPage
from pokemon_api.errors import InvalidPaginationError, PokemonCreateError
from pokemon_api.protocols import PokemonStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

LEADING_INT = re.compile(r"[+-]?[0-9]+")


def parse_positive_int(parameter: str, raw: str | None, default: int) -> int:
    """Parse a pagination query value.

    Args:
        parameter: Query parameter name, used in the error
        raw: Raw value from the query string, None when absent
        default: Value used when the parameter is absent

    Only the leading integer is read, so "2abc" is 2 and "1.5" is 1.

    Returns:
        The parsed integer, always >= 1

    Raises:
        InvalidPaginationError: If no leading integer is present or it is < 1
    """
    if raw is None:
        return default

    match = LEADING_INT.match(raw.strip())
    if match is None:
        raise InvalidPaginationError(parameter, raw)

    value = int(match.group(0))
    if value < 1:
        raise InvalidPaginationError(parameter, raw)
    return value


class PokemonService:
    """Core Pokemon orchestration service.

    Depends on the PokemonStore PROTOCOL, not a concrete backend.

    Example:
        ```python
        from pokemon_api.repositories import SqlitePokemonRepository
        from pokemon_api.services import PokemonService

        service = PokemonService.create(store=SqlitePokemonRepository.create())
        page = service.list_page(page=2, limit=10)
        ```
    """

    def __init__(self, store: PokemonStore) -> None:
        """Initialize the Pokemon service.

        Args:
            store: Storage backend (required).
        """
        self._store = store

    @classmethod
    def create(cls, store: PokemonStore) -> "PokemonService":
        """Factory method to create PokemonService.

        Args:
            store: Storage backend (required).

        Returns:
            Configured PokemonService instance
        """
        return cls(store=store)

    def create_pokemon(self, name: str, type_: str) -> PokemonEntity:
        """Build and persist a new Pokemon.

        Args:
            name: Pokemon name
            type_: Pokemon type

        Returns:
            The entity that was stored

        Raises:
            PokemonCreateError: If the store reports that nothing was written
        """
        pokemon = PokemonEntity(name=name, type=type_)

        if not self._store.insert(pokemon):
            raise PokemonCreateError(f"Store rejected Pokemon {name!r}")

        logger.info("Created Pokemon %r (%s)", name, type_)
        return pokemon

    def list_page(self, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> PokemonPage:
        """Return one page of Pokemon ordered by name.

        Business logic:
        1. skip = (page - 1) * limit
        2. Ask the store for `limit` items after `skip`, plus the total
        3. total_pages = ceil(total / limit)

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            PokemonPage for the requested window

        Raises:
            InvalidPaginationError: If page or limit is below 1
        """
        if page < 1:
            raise InvalidPaginationError("page", str(page))
        if limit < 1:
            raise InvalidPaginationError("limit", str(limit))

        skip = (page - 1) * limit
        items, total = self._store.find_and_count(skip=skip, take=limit, order_by="name")

        return PokemonPage(
            items=items,
            total=total,
            page=page,
            limit=limit,
            total_pages=-(-total // limit),
        )

    def count(self) -> int:
        """Count all stored Pokemon."""
        return self._store.count()

    def get_by_name(self, name: str) -> PokemonEntity | None:
        """Look up a Pokemon by exact name.

        Returns:
            The entity, or None if no Pokemon has this name
        """
        return self._store.find_one(name)

    def delete_all(self) -> None:
        """Remove every Pokemon from the store."""
        self._store.clear()
        logger.info("Cleared all Pokemon")

    def is_healthy(self) -> bool:
        """Check if the store is reachable."""
        return self._store.health_check()

    @property
    def store(self) -> PokemonStore:
        """Get the underlying store (for testing)."""
        return self._store
