"""Paginated listing result entity."""

from dataclasses import dataclass, field

from .pokemon import PokemonEntity


@dataclass(frozen=True)
class PokemonPage:
    """One page of Pokemon, ordered by name ascending.

    Attributes:
        items: Pokemon on this page (at most ``limit`` of them)
        total: Number of Pokemon in the whole store
        page: 1-based page number that was requested
        limit: Page size that was requested
        total_pages: ceil(total / limit), 0 for an empty store
    """

    total: int
    page: int
    limit: int
    total_pages: int
    items: list[PokemonEntity] = field(default_factory=list)
