"""Pokemon domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PokemonEntity:
    """Domain entity for a single Pokemon.

    Name is the only identity modeled. Nothing here enforces uniqueness
    or restricts the set of types.

    Attributes:
        name: Pokemon name, e.g. "Pikachu"
        type: Pokemon type, e.g. "Electric"
    """

    name: str
    type: str
