"""
Procedures: Games.

Input: game id.
Output: Result[Game], Result[list[...]] for the linked catalog entities
and reviews, Result[GameDetails] for the full page.
Failure cases:
    - Unknown game → Err(NOT_FOUND).
    - Unknown franchise / publisher on write → Err(BAD_REQUEST).
"""

import logging
from typing import Optional, TypeVar

from backlog.application.catalog.authorization import require_read_access
from backlog.application.catalog.base import CrudProcedures, guarded
from backlog.application.catalog.dtos import GameDetails
from backlog.domain.catalog.entities import (
    Developer,
    Feature,
    Franchise,
    Game,
    Genre,
    Platform,
    Publisher,
    Review,
    Session,
)
from backlog.domain.catalog.ports import EntityRepository, GameLinkRepository, ReviewRepository
from backlog.shared.result import Ok, Result

logger = logging.getLogger(__name__)

L = TypeVar("L")

TOP_REVIEWS = 4


class GameProcedures(CrudProcedures[Game]):
    """CRUD over games plus the reads that fan out from one game.

    A game references a franchise and a publisher; unknown references
    come back as BAD_REQUEST through the storage error normalizer.
    """

    entity_name = "Game"

    def __init__(
        self,
        repository: EntityRepository[Game],
        *,
        franchises: EntityRepository[Franchise],
        publishers: EntityRepository[Publisher],
        developer_games: GameLinkRepository[Developer],
        genre_games: GameLinkRepository[Genre],
        platform_games: GameLinkRepository[Platform],
        feature_games: GameLinkRepository[Feature],
        reviews: ReviewRepository,
    ) -> None:
        super().__init__(repository)
        self._franchises = franchises
        self._publishers = publishers
        self._developer_games = developer_games
        self._genre_games = genre_games
        self._platform_games = platform_games
        self._feature_games = feature_games
        self._reviews = reviews

    def _linked(
        self, session: Optional[Session], game_id: str, links: GameLinkRepository[L]
    ) -> Result[list[L]]:
        require_read_access(session, self.read_access)

        def run() -> Result[list[L]]:
            if self._repository.find_unique(game_id) is None:
                return self._not_found()
            return Ok(links.get_owners(game_id))

        return guarded(run)

    def get_developers(self, session: Optional[Session], game_id: str) -> Result[list[Developer]]:
        return self._linked(session, game_id, self._developer_games)

    def get_genres(self, session: Optional[Session], game_id: str) -> Result[list[Genre]]:
        return self._linked(session, game_id, self._genre_games)

    def get_platforms(self, session: Optional[Session], game_id: str) -> Result[list[Platform]]:
        return self._linked(session, game_id, self._platform_games)

    def get_features(self, session: Optional[Session], game_id: str) -> Result[list[Feature]]:
        return self._linked(session, game_id, self._feature_games)

    def get_reviews(self, session: Optional[Session], game_id: str) -> Result[list[Review]]:
        """Return every review of the game, oldest first."""
        require_read_access(session, self.read_access)

        def run() -> Result[list[Review]]:
            if self._repository.find_unique(game_id) is None:
                return self._not_found()
            return Ok(self._reviews.find_many(game_id=game_id))

        return guarded(run)

    def get_details(self, session: Optional[Session], game_id: str) -> Result[GameDetails]:
        """Return the game with its references, links, review count and top reviews."""
        require_read_access(session, self.read_access)

        def run() -> Result[GameDetails]:
            game = self._repository.find_unique(game_id)
            if game is None:
                return self._not_found()
            reviews = self._reviews.find_many(game_id=game_id)
            logger.debug("Game %s has %d reviews", game_id, len(reviews))
            return Ok(
                GameDetails(
                    game=game,
                    franchise=self._franchises.find_unique(game.franchise_id),
                    publisher=self._publishers.find_unique(game.publisher_id),
                    developers=self._developer_games.get_owners(game_id),
                    genres=self._genre_games.get_owners(game_id),
                    platforms=self._platform_games.get_owners(game_id),
                    features=self._feature_games.get_owners(game_id),
                    review_count=len(reviews),
                    top_reviews=self._reviews.find_top_for_game(game_id, TOP_REVIEWS),
                )
            )

        return guarded(run)
