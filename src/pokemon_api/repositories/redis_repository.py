"""Redis implementation of PokemonStore.

Layout under the configured key prefix (default "pokemon"):

    {prefix}:seq            INCR counter used as entry id
    {prefix}:item:{id}      hash with "name" and "type"
    {prefix}:by_name        sorted set, all scores 0, members "{name}\\x00{id}"
    {prefix}:by_type        sorted set, all scores 0, members "{type}\\x00{id}"

With equal scores Redis orders sorted-set members lexicographically, so
ZRANGE by index gives name-ordered skip/take directly. Zero-padded ids keep
duplicate names in insertion order.
"""

import logging

import redis

from pokemon_api.config import get_redis_client, settings
from pokemon_api.entities import PokemonEntity

logger = logging.getLogger(__name__)

SEPARATOR = "\x00"
ID_WIDTH = 12
# ZRANGE indexes are signed 64-bit
REDIS_MAX_INDEX = 2**63 - 1


class RedisPokemonRepository:
    """Redis implementation of the PokemonStore protocol.

    This class satisfies the PokemonStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis repository.

        Args:
            redis_client: Redis client instance, must use decode_responses=True.
                          If None, creates default.
            key_prefix: Namespace for all keys. Defaults to settings.redis_key_prefix.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.redis_key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisPokemonRepository":
        """Factory method to create RedisPokemonRepository with defaults.

        Args:
            key_prefix: Key namespace. If None, uses settings.

        Returns:
            Configured RedisPokemonRepository
        """
        return cls(key_prefix=key_prefix)

    def _key(self, *parts: str) -> str:
        return ":".join((self._prefix, *parts))

    def _index_key(self, order_by: str) -> str:
        if order_by not in ("name", "type"):
            raise ValueError(f"Cannot order by {order_by!r}")
        return self._key(f"by_{order_by}")

    @staticmethod
    def _member(value: str, entry_id: str) -> str:
        return f"{value}{SEPARATOR}{entry_id}"

    @staticmethod
    def _entry_id(member: str) -> str:
        return member.rsplit(SEPARATOR, 1)[1]

    def _load(self, entry_ids: list[str]) -> list[PokemonEntity]:
        """Fetch hashes for the given ids, preserving order."""
        if not entry_ids:
            return []

        pipe = self._client.pipeline(transaction=False)
        for entry_id in entry_ids:
            pipe.hgetall(self._key("item", entry_id))
        rows = pipe.execute()

        items = []
        for entry_id, row in zip(entry_ids, rows):
            if not row:
                # Index entry outlived its hash (concurrent clear)
                logger.warning("Missing hash for indexed entry %s", entry_id)
                continue
            items.append(PokemonEntity(name=row["name"], type=row["type"]))
        return items

    def insert(self, pokemon: PokemonEntity) -> bool:
        """Store a Pokemon and index it by name and type.

        Returns:
            True if the hash and both index members were written
        """
        entry_id = str(self._client.incr(self._key("seq"))).zfill(ID_WIDTH)

        pipe = self._client.pipeline()
        pipe.hset(
            self._key("item", entry_id),
            mapping={"name": pokemon.name, "type": pokemon.type},
        )
        pipe.zadd(self._key("by_name"), {self._member(pokemon.name, entry_id): 0})
        pipe.zadd(self._key("by_type"), {self._member(pokemon.type, entry_id): 0})
        written_fields, added_by_name, added_by_type = pipe.execute()

        return written_fields > 0 and added_by_name == 1 and added_by_type == 1

    def find_and_count(
        self,
        skip: int,
        take: int,
        order_by: str = "name",
    ) -> tuple[list[PokemonEntity], int]:
        """Fetch one ordered window plus the total number of entries."""
        index_key = self._index_key(order_by)

        if skip > REDIS_MAX_INDEX:
            return [], self._client.zcard(index_key)  # type: ignore[return-value]

        # -1 means up to the last member
        stop = skip + take - 1
        if stop > REDIS_MAX_INDEX:
            stop = -1

        pipe = self._client.pipeline()
        pipe.zrange(index_key, skip, stop)
        pipe.zcard(index_key)
        members, total = pipe.execute()

        items = self._load([self._entry_id(member) for member in members])
        return items, total

    def count(self) -> int:
        result: int = self._client.zcard(self._key("by_name"))  # type: ignore[assignment]
        return result

    def find_one(self, name: str) -> PokemonEntity | None:
        """Find the earliest-inserted Pokemon with this exact name."""
        # Every member for `name` sorts between "name\x00" and "name\x01",
        # but so do names that merely start with "name\x00"
        members = self._client.zrangebylex(
            self._key("by_name"),
            f"[{name}{SEPARATOR}",
            f"({name}\x01",
        )
        for member in members:
            value, entry_id = member.rsplit(SEPARATOR, 1)
            if value != name:
                continue
            items = self._load([entry_id])
            if items:
                return items[0]
        return None

    def clear(self) -> None:
        keys = list(self._client.scan_iter(match=self._key("*")))
        if keys:
            self._client.delete(*keys)
        logger.info("Deleted %d Redis keys under %s:*", len(keys), self._prefix)

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
