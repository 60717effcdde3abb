"""
Adapter: Game <-> catalog entity associations.

Implements the GameLinkRepository port over one link table, such as
game_developers or game_genres.
"""

import logging
from typing import Generic, TypeVar

from sqlalchemy import Table, delete, insert, select
from sqlalchemy.engine import Engine

from backlog.domain.catalog.entities import Game
from backlog.domain.catalog.ports import GameLinkRepository
from backlog.infrastructure.catalog.tables import games

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GameLinkRepositoryAdapter(GameLinkRepository[T], Generic[T]):
    """Reads and writes links between games and one owner table.

    Args:
        engine: Shared SQLAlchemy engine.
        link_table: Association table with ``game_id`` and ``owner_column``.
        owner_table: Table holding the owning rows.
        owner_column: Column of ``link_table`` referencing ``owner_table``.
        entity: Dataclass the owner rows are mapped onto.
    """

    def __init__(
        self,
        engine: Engine,
        link_table: Table,
        owner_table: Table,
        owner_column: str,
        entity: type[T],
    ) -> None:
        self._engine = engine
        self._links = link_table
        self._owners = owner_table
        self._owner_column = owner_column
        self._entity = entity

    def get_games(self, owner_id: str) -> list[Game]:
        stmt = (
            select(games)
            .join(self._links, self._links.c.game_id == games.c.id)
            .where(self._links.c[self._owner_column] == owner_id)
            .order_by(games.c.name)
        )
        with self._engine.connect() as conn:
            return [Game(**row._mapping) for row in conn.execute(stmt)]

    def get_owners(self, game_id: str) -> list[T]:
        stmt = (
            select(self._owners)
            .join(self._links, self._links.c[self._owner_column] == self._owners.c.id)
            .where(self._links.c.game_id == game_id)
            .order_by(self._owners.c.name)
        )
        with self._engine.connect() as conn:
            return [self._entity(**row._mapping) for row in conn.execute(stmt)]

    def link(self, owner_id: str, game_ids: list[str]) -> None:
        if not game_ids:
            return
        with self._engine.begin() as conn:
            conn.execute(
                insert(self._links),
                [{self._owner_column: owner_id, "game_id": game_id} for game_id in game_ids],
            )
        logger.info("Linked %d games via %s to %s", len(game_ids), self._links.name, owner_id)

    def unlink(self, owner_id: str, game_ids: list[str]) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                delete(self._links).where(
                    self._links.c[self._owner_column] == owner_id,
                    self._links.c.game_id.in_(game_ids),
                )
            )
