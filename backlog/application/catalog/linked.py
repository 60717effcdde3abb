"""
Procedures: Catalog entities that link to games.

Developers, genres, platforms and features share the same shape: admin
CRUD plus a many-to-many link to games.

Input: owner id, and game ids for the link procedures.
Output: Result[T] / Result[LinkedGames].
Failure cases:
    - Unknown owner → Err(NOT_FOUND).
    - Unknown or already linked game → Err(BAD_REQUEST) from the normalizer.
"""

import logging
from typing import Optional, TypeVar

from backlog.application.catalog.authorization import require_read_access, require_role
from backlog.application.catalog.base import CrudProcedures, guarded
from backlog.application.catalog.dtos import LinkedGames
from backlog.domain.catalog.entities import Session
from backlog.domain.catalog.ports import EntityRepository, GameLinkRepository
from backlog.shared.result import Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GameLinkedProcedures(CrudProcedures[T]):
    """CRUD over one catalog entity plus game linking."""

    def __init__(self, repository: EntityRepository[T], game_links: GameLinkRepository[T]) -> None:
        super().__init__(repository)
        self._game_links = game_links

    def get_games(self, session: Optional[Session], owner_id: str) -> Result[LinkedGames]:
        """Return the entity with its games."""
        require_read_access(session, self.read_access)
        return guarded(lambda: self._with_games(owner_id))

    def add_games(
        self, session: Optional[Session], owner_id: str, game_ids: list[str]
    ) -> Result[LinkedGames]:
        require_role(session, self.write_role)

        def run() -> Result[LinkedGames]:
            if self._repository.find_unique(owner_id) is None:
                return self._not_found()
            self._game_links.link(owner_id, game_ids)
            return self._with_games(owner_id)

        return guarded(run)

    def remove_games(
        self, session: Optional[Session], owner_id: str, game_ids: list[str]
    ) -> Result[LinkedGames]:
        require_role(session, self.write_role)

        def run() -> Result[LinkedGames]:
            if self._repository.find_unique(owner_id) is None:
                return self._not_found()
            self._game_links.unlink(owner_id, game_ids)
            return self._with_games(owner_id)

        return guarded(run)

    def _with_games(self, owner_id: str) -> Result[LinkedGames]:
        entity = self._repository.find_unique(owner_id)
        if entity is None:
            return self._not_found()
        games = self._game_links.get_games(owner_id)
        logger.debug("%s %s has %d games", self.entity_name, owner_id, len(games))
        return Ok(LinkedGames(entity=entity, games=games))
