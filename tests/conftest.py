"""
Shared fixtures for the Pokemon API tests.
"""

import pytest
from fastapi.testclient import TestClient

from pokemon_api.api.app import create_app
from pokemon_api.entities import PokemonEntity
from pokemon_api.repositories import InMemoryPokemonRepository
from pokemon_api.services import PokemonService


class BrokenStore:
    """Store whose every call fails, for exercising 500 paths."""

    def insert(self, pokemon: PokemonEntity) -> bool:
        raise RuntimeError("database is down")

    def find_and_count(self, skip: int, take: int, order_by: str = "name"):
        raise RuntimeError("database is down")

    def count(self) -> int:
        raise RuntimeError("database is down")

    def find_one(self, name: str):
        raise RuntimeError("database is down")

    def clear(self) -> None:
        raise RuntimeError("database is down")

    def health_check(self) -> bool:
        return False


class RejectingStore(InMemoryPokemonRepository):
    """Store that reports every insert as not persisted."""

    def insert(self, pokemon: PokemonEntity) -> bool:
        return False


@pytest.fixture
def store():
    """Create an empty in-memory store."""
    return InMemoryPokemonRepository()


@pytest.fixture
def service(store):
    """Create a service over the in-memory store."""
    return PokemonService.create(store=store)


@pytest.fixture
def client(store):
    """Create a test client with the in-memory store injected."""
    with TestClient(create_app(store=store, backend="memory")) as test_client:
        yield test_client


@pytest.fixture
def rejecting_client():
    """Create a test client whose store never persists inserts."""
    with TestClient(create_app(store=RejectingStore(), backend="memory")) as test_client:
        yield test_client


@pytest.fixture
def broken_client():
    """Create a test client whose store fails on every call."""
    with TestClient(create_app(store=BrokenStore(), backend="memory")) as test_client:
        yield test_client
