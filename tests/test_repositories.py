"""
Tests shared by every PokemonStore implementation.

The Redis variant needs a reachable server (REDIS_URL, database 15 is used)
and is skipped otherwise.
"""

import os
import uuid

import pytest
import redis

from pokemon_api.entities import PokemonEntity
from pokemon_api.protocols import PokemonStore
from pokemon_api.repositories import (
    InMemoryPokemonRepository,
    RedisPokemonRepository,
    SqlitePokemonRepository,
)


def make_redis_store():
    url = os.getenv("TEST_REDIS_URL", "redis://localhost:6379/15")
    client = redis.from_url(url, decode_responses=True)
    try:
        client.ping()
    except redis.RedisError:
        pytest.skip(f"Redis not reachable at {url}")
    return RedisPokemonRepository(redis_client=client, key_prefix=f"pokemon-test-{uuid.uuid4().hex}")


@pytest.fixture(params=["memory", "sqlite", "redis"])
def repo(request, tmp_path):
    """Create an empty store of each kind."""
    if request.param == "memory":
        store = InMemoryPokemonRepository()
    elif request.param == "sqlite":
        store = SqlitePokemonRepository(database_url=str(tmp_path / "pokemon.db"))
    else:
        store = make_redis_store()

    yield store

    store.clear()
    if isinstance(store, SqlitePokemonRepository):
        store.close()


def test_satisfies_protocol(repo):
    """Test the implementation matches PokemonStore structurally."""
    assert isinstance(repo, PokemonStore)
    assert repo.health_check() is True


def test_insert_and_find_one(repo):
    """Test inserted Pokemon can be found by exact name."""
    assert repo.insert(PokemonEntity(name="Pikachu", type="Electric")) is True
    assert repo.find_one("Pikachu") == PokemonEntity(name="Pikachu", type="Electric")
    assert repo.find_one("pikachu") is None
    assert repo.find_one("Pika") is None


def test_find_one_returns_earliest_duplicate(repo):
    """Test duplicate names are allowed and the first one wins."""
    repo.insert(PokemonEntity(name="Ditto", type="Normal"))
    repo.insert(PokemonEntity(name="Ditto", type="Transform"))
    assert repo.count() == 2
    assert repo.find_one("Ditto").type == "Normal"


def test_find_and_count_orders_by_name(repo):
    """Test skip/take walks the name-ordered sequence."""
    names = ["Squirtle", "Abra", "Mew", "Zubat", "Eevee", "Onix", "Bulbasaur"]
    for name in names:
        repo.insert(PokemonEntity(name=name, type="Normal"))

    expected = sorted(names)
    items, total = repo.find_and_count(skip=0, take=3)
    assert total == 7
    assert [p.name for p in items] == expected[:3]

    items, total = repo.find_and_count(skip=3, take=3)
    assert [p.name for p in items] == expected[3:6]

    items, total = repo.find_and_count(skip=6, take=3)
    assert [p.name for p in items] == expected[6:]

    items, total = repo.find_and_count(skip=10, take=3)
    assert items == []
    assert total == 7


def test_find_and_count_prefix_names(repo):
    """Test a name that prefixes another sorts first."""
    for name in ["Porygon2", "Porygon", "Porygon-Z"]:
        repo.insert(PokemonEntity(name=name, type="Normal"))
    items, _ = repo.find_and_count(skip=0, take=10)
    assert [p.name for p in items] == sorted(["Porygon2", "Porygon", "Porygon-Z"])


def test_find_and_count_huge_window(repo):
    """Test take and skip beyond 64-bit range behave like "everything" and "nothing"."""
    repo.insert(PokemonEntity(name="Pikachu", type="Electric"))
    repo.insert(PokemonEntity(name="Abra", type="Psychic"))

    items, total = repo.find_and_count(skip=0, take=10**19)
    assert [p.name for p in items] == ["Abra", "Pikachu"]
    assert total == 2

    items, total = repo.find_and_count(skip=1, take=2**63 - 1)
    assert [p.name for p in items] == ["Pikachu"]

    assert repo.find_and_count(skip=10**20, take=10) == ([], 2)


def test_find_one_ignores_names_with_matching_prefix(repo):
    """Test a name containing a NUL after the query text is not an exact match."""
    repo.insert(PokemonEntity(name="a\x00b", type="Normal"))
    assert repo.find_one("a") is None
    assert repo.find_one("a\x00b") == PokemonEntity(name="a\x00b", type="Normal")

    repo.insert(PokemonEntity(name="a", type="Fire"))
    assert repo.find_one("a") == PokemonEntity(name="a", type="Fire")


def test_find_and_count_by_type(repo):
    """Test ordering by type."""
    repo.insert(PokemonEntity(name="Charmander", type="Fire"))
    repo.insert(PokemonEntity(name="Bulbasaur", type="Grass"))
    repo.insert(PokemonEntity(name="Pikachu", type="Electric"))
    items, _ = repo.find_and_count(skip=0, take=10, order_by="type")
    assert [p.type for p in items] == ["Electric", "Fire", "Grass"]


def test_find_and_count_unknown_order(repo):
    """Test ordering by an unknown field is refused."""
    with pytest.raises(ValueError):
        repo.find_and_count(skip=0, take=1, order_by="name; DROP TABLE pokemon")


def test_clear(repo):
    """Test clear removes everything."""
    repo.insert(PokemonEntity(name="Pikachu", type="Electric"))
    repo.insert(PokemonEntity(name="Onix", type="Rock"))
    repo.clear()
    assert repo.count() == 0
    assert repo.find_one("Pikachu") is None
    assert repo.find_and_count(skip=0, take=10) == ([], 0)


def test_sqlite_persists_across_instances(tmp_path):
    """Test rows survive reopening the same database file."""
    path = str(tmp_path / "pokemon.db")
    first = SqlitePokemonRepository(database_url=path)
    first.insert(PokemonEntity(name="Lapras", type="Water"))
    first.close()

    second = SqlitePokemonRepository(database_url=path)
    assert second.find_one("Lapras") == PokemonEntity(name="Lapras", type="Water")
    second.close()


def test_sqlite_in_memory_database():
    """Test a :memory: database keeps state for the repository's lifetime."""
    store = SqlitePokemonRepository(database_url=":memory:")
    store.insert(PokemonEntity(name="Gengar", type="Ghost"))
    assert store.count() == 1
    assert store.path == ":memory:"
    store.close()
