"""
Procedures: Playlists.

Playlists are soft-deleted: ``delete`` stamps the row and returns it as it
was, and every default read ignores stamped rows. Reads are open to
anonymous callers but only show public playlists plus the caller's own.

Failure cases:
    - Gate rejection → UnauthorizedError / ForbiddenError raised.
    - Missing, deleted or invisible playlist → Err(NOT_FOUND).
    - Reordering a game that is not in the playlist → Err(NOT_FOUND).
    - Duplicate like / duplicate game / unknown game → Err(BAD_REQUEST).
"""

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Optional

from backlog.application.catalog.authorization import (
    require_owner_or_admin,
    require_read_access,
    require_role,
    require_session,
)
from backlog.application.catalog.base import CrudProcedures, guarded
from backlog.application.catalog.dtos import CreatePlaylistCommand, UpdatePlaylistCommand
from backlog.domain.catalog.entities import (
    Playlist,
    PlaylistDetails,
    PlaylistGame,
    Role,
    Session,
)
from backlog.domain.catalog.ports import PlaylistRepository
from backlog.shared.result import Err, Ok, Result, not_found

logger = logging.getLogger(__name__)


class PlaylistProcedures(CrudProcedures[Playlist]):
    """Playlist procedures: admin CRUD, visibility-aware reads, likes and games."""

    entity_name = "Playlist"

    def __init__(self, repository: PlaylistRepository) -> None:
        super().__init__(repository)
        self._playlists = repository

    def _viewer(self, session: Optional[Session]) -> Optional[str]:
        return session.user_id if session is not None else None

    def _visible(self, session: Optional[Session], playlist_id: str) -> Optional[Playlist]:
        found = self._playlists.find_visible(self._viewer(session), playlist_id)
        return found[0] if found else None

    def _details(self, playlist: Playlist) -> PlaylistDetails:
        return PlaylistDetails(
            playlist=playlist,
            games=self._playlists.get_games(playlist.id),
            like_count=self._playlists.count_likes(playlist.id),
        )

    def create(self, session: Optional[Session], command: CreatePlaylistCommand) -> Result[Playlist]:
        session = require_role(session, self.write_role)
        values = {**asdict(command), "user_id": session.user_id}
        logger.info("Creating playlist for user %s", session.user_id)
        return guarded(lambda: Ok(self._playlists.create(values)))

    def get_all(self, session: Optional[Session]) -> Result[list[Playlist]]:
        require_read_access(session, self.read_access)
        return guarded(lambda: Ok(self._playlists.find_visible(self._viewer(session))))

    def get_by_id(self, session: Optional[Session], entity_id: str) -> Result[Playlist]:
        require_read_access(session, self.read_access)
        return guarded(lambda: self._found(self._visible(session, entity_id)))

    def _values(self, command: UpdatePlaylistCommand) -> dict[str, Any]:
        return {name: value for name, value in asdict(command).items() if value is not None}

    def get_deleted(self, session: Optional[Session]) -> Result[list[Playlist]]:
        """Admin view of soft-deleted playlists."""
        require_role(session, Role.ADMIN)
        return guarded(lambda: Ok(self._playlists.find_deleted_many()))

    def get_details(self, session: Optional[Session], playlist_id: str) -> Result[PlaylistDetails]:
        require_read_access(session, self.read_access)

        def run() -> Result[PlaylistDetails]:
            playlist = self._visible(session, playlist_id)
            if playlist is None:
                return self._not_found()
            return Ok(self._details(playlist))

        return guarded(run)

    def like(self, session: Optional[Session], playlist_id: str) -> Result[PlaylistDetails]:
        session = require_session(session)

        def run() -> Result[PlaylistDetails]:
            playlist = self._visible(session, playlist_id)
            if playlist is None:
                return self._not_found()
            self._playlists.add_like(playlist_id, session.user_id)
            return Ok(self._details(playlist))

        return guarded(run)

    def unlike(self, session: Optional[Session], playlist_id: str) -> Result[PlaylistDetails]:
        session = require_session(session)

        def run() -> Result[PlaylistDetails]:
            playlist = self._visible(session, playlist_id)
            if playlist is None:
                return self._not_found()
            if self._playlists.remove_like(playlist_id, session.user_id) == 0:
                return not_found("Like not found")
            return Ok(self._details(playlist))

        return guarded(run)

    def add_games(
        self, session: Optional[Session], playlist_id: str, game_ids: list[str]
    ) -> Result[PlaylistDetails]:
        """Append games after the highest position already in the playlist."""
        session = require_session(session)
        owned = self._owned(session, playlist_id)
        if isinstance(owned, Err):
            return owned

        def run() -> Result[PlaylistDetails]:
            highest = self._playlists.max_order(playlist_id)
            start = 0 if highest is None else highest + 1
            added_at = datetime.now(timezone.utc)
            entries = [
                PlaylistGame(game_id=game_id, order=start + index, added_at=added_at)
                for index, game_id in enumerate(game_ids)
            ]
            self._playlists.add_games(playlist_id, entries)
            return self._touched(playlist_id)

        return guarded(run)

    def remove_games(
        self, session: Optional[Session], playlist_id: str, game_ids: list[str]
    ) -> Result[PlaylistDetails]:
        session = require_session(session)
        owned = self._owned(session, playlist_id)
        if isinstance(owned, Err):
            return owned

        def run() -> Result[PlaylistDetails]:
            if self._playlists.remove_games(playlist_id, game_ids) == 0:
                return not_found("None of these games are in the playlist")
            return self._touched(playlist_id)

        return guarded(run)

    def update_order(
        self, session: Optional[Session], playlist_id: str, game_id: str, order: int
    ) -> Result[PlaylistDetails]:
        """Move one game to a new position.

        Games between the old and the new position shift by one to close
        the gap, all in one storage transaction.
        """
        session = require_session(session)
        owned = self._owned(session, playlist_id)
        if isinstance(owned, Err):
            return owned

        def run() -> Result[PlaylistDetails]:
            if not self._playlists.move_game(playlist_id, game_id, order):
                return not_found("Game not in playlist")
            logger.info("Moved game %s in playlist %s to %d", game_id, playlist_id, order)
            return self._touched(playlist_id)

        return guarded(run)

    def _owned(self, session: Session, playlist_id: str) -> Result[Playlist]:
        """Look up the active playlist and check the caller may change it.

        Raises ForbiddenError when the caller is neither the owner nor an admin.
        """
        found = guarded(lambda: self._found(self._playlists.find_unique(playlist_id)))
        if isinstance(found, Ok):
            require_owner_or_admin(session, found.value.user_id)
        return found

    def _touched(self, playlist_id: str) -> Result[PlaylistDetails]:
        playlist = self._playlists.update(playlist_id, {})
        if playlist is None:
            return self._not_found()
        return Ok(self._details(playlist))
