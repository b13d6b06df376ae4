"""SQLite implementation of PokemonStore.

Stores Pokemon in a single relational table:

    pokemon(id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT, type TEXT)

All statements are parameterized. The ORDER BY column comes from a fixed
whitelist, never from user input directly. One connection is opened per
repository and shared behind a lock, which also makes ``:memory:``
databases usable across requests.
"""

import logging
import os
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pokemon_api.config import settings
from pokemon_api.entities import PokemonEntity

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS pokemon (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    type TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_pokemon_name ON pokemon (name);
"""

SQLITE_MAX_INTEGER = 2**63 - 1

ORDER_COLUMNS = {
    "name": "name ASC, id ASC",
    "type": "type ASC, id ASC",
}


def resolve_database_path(database_url: str) -> str:
    """Resolve the configured database location.

    ``:memory:`` and absolute paths are returned unchanged; relative paths
    are resolved against the current working directory.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    return str(Path(database_url).resolve())


class SqlitePokemonRepository:
    """SQLite implementation of the PokemonStore protocol."""

    def __init__(self, database_url: str | None = None) -> None:
        """Open the database and make sure the table exists.

        Args:
            database_url: File path or ":memory:". Defaults to settings.database_url.
        """
        self._path = resolve_database_path(database_url or settings.database_url)
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(self._path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._init_schema()

    @classmethod
    def create(cls, database_url: str | None = None) -> "SqlitePokemonRepository":
        """Factory method to create SqlitePokemonRepository with defaults.

        Args:
            database_url: Database location. If None, uses settings.

        Returns:
            Configured SqlitePokemonRepository
        """
        return cls(database_url=database_url)

    def _init_schema(self) -> None:
        with self._lock:
            self._conn.executescript(SCHEMA)
            self._conn.commit()
        logger.info("SQLite store ready at %s", self._path)

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor under the lock, committing on success."""
        with self._lock:
            cursor = self._conn.cursor()
            try:
                yield cursor
                self._conn.commit()
            except Exception:
                self._conn.rollback()
                raise
            finally:
                cursor.close()

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> PokemonEntity:
        return PokemonEntity(name=row["name"], type=row["type"])

    def insert(self, pokemon: PokemonEntity) -> bool:
        """Insert one row.

        Returns:
            True if exactly one row was written
        """
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO pokemon (name, type) VALUES (?, ?)",
                (pokemon.name, pokemon.type),
            )
            return cursor.rowcount == 1

    def find_and_count(
        self,
        skip: int,
        take: int,
        order_by: str = "name",
    ) -> tuple[list[PokemonEntity], int]:
        """Fetch one ordered window plus the table's total row count."""
        order_clause = ORDER_COLUMNS.get(order_by)
        if order_clause is None:
            raise ValueError(f"Cannot order by {order_by!r}")

        with self._cursor() as cursor:
            total = cursor.execute("SELECT COUNT(*) FROM pokemon").fetchone()[0]
            if skip > SQLITE_MAX_INTEGER:
                return [], total

            # LIMIT -1 means no limit
            limit = take if take <= SQLITE_MAX_INTEGER else -1
            rows = cursor.execute(
                f"SELECT name, type FROM pokemon ORDER BY {order_clause} LIMIT ? OFFSET ?",
                (limit, skip),
            ).fetchall()

        return [self._row_to_entity(row) for row in rows], total

    def count(self) -> int:
        with self._cursor() as cursor:
            return cursor.execute("SELECT COUNT(*) FROM pokemon").fetchone()[0]

    def find_one(self, name: str) -> PokemonEntity | None:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT name, type FROM pokemon WHERE name = ? ORDER BY id LIMIT 1",
                (name,),
            ).fetchone()
        return self._row_to_entity(row) if row is not None else None

    def clear(self) -> None:
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM pokemon")

    def health_check(self) -> bool:
        """Check the connection still answers a trivial query.

        Returns:
            True if healthy, False otherwise
        """
        try:
            with self._cursor() as cursor:
                cursor.execute("SELECT 1").fetchone()
            return True
        except sqlite3.Error:
            return False

    def close(self) -> None:
        """Close the underlying connection.

        Should be called when shutting down the application.
        """
        with self._lock:
            self._conn.close()

    @property
    def path(self) -> str:
        """Get the resolved database location."""
        return self._path
