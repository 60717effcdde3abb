"""
Adapter: Playlist persistence.

Implements the PlaylistRepository port on top of the soft-delete
repository: visibility filtering, likes and ordered games.
"""

import logging
from typing import Optional

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.engine import Engine

from backlog.domain.catalog.entities import Playlist, PlaylistGame, Visibility
from backlog.domain.catalog.ports import PlaylistRepository
from backlog.infrastructure.catalog.like_repository import SqlLikesMixin
from backlog.infrastructure.catalog.sql_repository import SoftDeleteSqlRepository
from backlog.infrastructure.catalog.tables import (
    playlist_games,
    playlist_likes,
    playlists,
)

logger = logging.getLogger(__name__)


class PlaylistRepositoryAdapter(
    SqlLikesMixin, SoftDeleteSqlRepository[Playlist], PlaylistRepository
):
    """SQL implementation of the playlist port."""

    _like_table = playlist_likes
    _like_column = "playlist_id"

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine, playlists, Playlist)

    def find_visible(
        self, viewer_id: Optional[str], playlist_id: Optional[str] = None
    ) -> list[Playlist]:
        """Return active playlists that are public or owned by the viewer.

        FOLLOWERS_ONLY playlists fall under the owner rule: there is no
        follower graph to widen them with.
        """
        audience = [playlists.c.visibility == Visibility.PUBLIC]
        if viewer_id is not None:
            audience.append(playlists.c.user_id == viewer_id)

        clauses = [or_(*audience), *self._scope()]
        if playlist_id is not None:
            clauses.append(playlists.c.id == playlist_id)

        with self._engine.connect() as conn:
            return self._fetch(conn, *clauses)

    def get_games(self, playlist_id: str) -> list[PlaylistGame]:
        stmt = (
            select(
                playlist_games.c.game_id,
                playlist_games.c["order"],
                playlist_games.c.added_at,
            )
            .where(playlist_games.c.playlist_id == playlist_id)
            .order_by(playlist_games.c["order"])
        )
        with self._engine.connect() as conn:
            return [PlaylistGame(**row._mapping) for row in conn.execute(stmt)]

    def max_order(self, playlist_id: str) -> Optional[int]:
        stmt = select(func.max(playlist_games.c["order"])).where(
            playlist_games.c.playlist_id == playlist_id
        )
        with self._engine.connect() as conn:
            return conn.execute(stmt).scalar_one_or_none()

    def add_games(self, playlist_id: str, entries: list[PlaylistGame]) -> None:
        if not entries:
            return
        rows = [
            {
                "playlist_id": playlist_id,
                "game_id": entry.game_id,
                "order": entry.order,
                "added_at": entry.added_at,
            }
            for entry in entries
        ]
        with self._engine.begin() as conn:
            conn.execute(insert(playlist_games), rows)
        logger.info("Added %d games to playlist %s", len(rows), playlist_id)

    def remove_games(self, playlist_id: str, game_ids: list[str]) -> int:
        with self._engine.begin() as conn:
            result = conn.execute(
                delete(playlist_games).where(
                    playlist_games.c.playlist_id == playlist_id,
                    playlist_games.c.game_id.in_(game_ids),
                )
            )
        return result.rowcount

    def move_game(self, playlist_id: str, game_id: str, order: int) -> bool:
        position = playlist_games.c["order"]
        in_playlist = playlist_games.c.playlist_id == playlist_id
        with self._engine.begin() as conn:
            current = conn.execute(
                select(position).where(in_playlist, playlist_games.c.game_id == game_id)
            ).scalar_one_or_none()
            if current is None:
                return False
            if order < current:
                conn.execute(
                    update(playlist_games)
                    .where(in_playlist, position >= order, position < current)
                    .values({position: position + 1})
                )
            elif order > current:
                conn.execute(
                    update(playlist_games)
                    .where(in_playlist, position > current, position <= order)
                    .values({position: position - 1})
                )
            conn.execute(
                update(playlist_games)
                .where(in_playlist, playlist_games.c.game_id == game_id)
                .values({position: order})
            )
        logger.info("Moved game %s to %d in playlist %s", game_id, order, playlist_id)
        return True
