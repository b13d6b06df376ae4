#!/usr/bin/env python3
"""
Seed script for the Pokemon API.

Loads a handful of sample Pokemon into the configured store through the
service layer, then prints the first pages of the name-ordered listing.

    STORE_BACKEND=sqlite DATABASE_URL=pokemon.db python scripts/seed.py
"""

import argparse

from pokemon_api.api.dependencies import build_store
from pokemon_api.config import settings
from pokemon_api.services import PokemonService

SAMPLE_POKEMON = [
    ("Bulbasaur", "Grass"),
    ("Charmander", "Fire"),
    ("Squirtle", "Water"),
    ("Pikachu", "Electric"),
    ("Jigglypuff", "Normal"),
    ("Gengar", "Ghost"),
    ("Onix", "Rock"),
    ("Eevee", "Normal"),
    ("Snorlax", "Normal"),
    ("Dragonite", "Dragon"),
    ("Mewtwo", "Psychic"),
    ("Lapras", "Water"),
]


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 50)
    print(f"  {title}")
    print("=" * 50)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the Pokemon store with sample data")
    parser.add_argument("--backend", default=settings.store_backend, help="memory, sqlite or redis")
    parser.add_argument("--limit", type=int, default=5, help="page size for the printed listing")
    parser.add_argument("--clear", action="store_true", help="delete existing Pokemon first")
    args = parser.parse_args()

    service = PokemonService.create(store=build_store(args.backend))

    if args.clear:
        service.delete_all()
        print("Cleared existing Pokemon")

    print_section(f"Seeding {len(SAMPLE_POKEMON)} Pokemon ({args.backend})")
    for name, type_ in SAMPLE_POKEMON:
        service.create_pokemon(name, type_)
        print(f"  + {name:<12} {type_}")

    number = 1
    while True:
        current = service.list_page(page=number, limit=args.limit)
        if not current.items:
            break
        print_section(f"Page {current.page}/{current.total_pages} (total {current.total})")
        for pokemon in current.items:
            print(f"  {pokemon.name:<12} {pokemon.type}")
        number += 1


if __name__ == "__main__":
    main()
