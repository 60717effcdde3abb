"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that procedures require from storage.
Infrastructure adapters implement these interfaces and let storage
exceptions propagate; procedures normalize them into Results.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from backlog.domain.catalog.entities import Comment, Game, Playlist, PlaylistGame, Review

T = TypeVar("T")


class EntityRepository(ABC, Generic[T]):
    """Port for the five basic storage operations on one entity type."""

    @abstractmethod
    def create(self, values: dict[str, Any]) -> T:
        """Insert a row and return it with its generated identifier."""
        raise NotImplementedError

    @abstractmethod
    def find_unique(self, entity_id: str) -> Optional[T]:
        """Return the row with this identifier, or None."""
        raise NotImplementedError

    @abstractmethod
    def find_many(self, **filters: Any) -> list[T]:
        """Return every row matching the equality filters."""
        raise NotImplementedError

    @abstractmethod
    def update(self, entity_id: str, values: dict[str, Any]) -> Optional[T]:
        """Apply ``values`` and return the updated row, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, entity_id: str) -> Optional[T]:
        """Remove the row and return it as it was, or None if absent."""
        raise NotImplementedError


class SoftDeleteRepository(EntityRepository[T]):
    """Port for entities whose deletion only sets a timestamp.

    ``find_many``, ``find_unique`` and ``update`` only ever see active rows
    (deletion timestamp unset), whatever filters the caller passes.
    """

    @abstractmethod
    def find_deleted_many(self, **filters: Any) -> list[T]:
        """Return soft-deleted rows matching the filters."""
        raise NotImplementedError

    @abstractmethod
    def find_deleted_unique(self, entity_id: str) -> Optional[T]:
        """Return the soft-deleted row with this identifier, or None."""
        raise NotImplementedError

    @abstractmethod
    def soft_delete(self, entity_id: str, now: Optional[datetime] = None) -> Optional[T]:
        """Stamp the row as deleted and return it, or None if absent.

        Stamping an already deleted row moves the timestamp forward.
        """
        raise NotImplementedError


class GameLinkRepository(ABC, Generic[T]):
    """Port for a many-to-many association between games and one entity type.

    Developers, genres, platforms and features all link to games the same
    way; ``T`` is the owning entity.
    """

    @abstractmethod
    def get_games(self, owner_id: str) -> list[Game]:
        """Return the games linked to the owner, ordered by name."""
        raise NotImplementedError

    @abstractmethod
    def get_owners(self, game_id: str) -> list[T]:
        """Return the owners linked to the game, ordered by name."""
        raise NotImplementedError

    @abstractmethod
    def link(self, owner_id: str, game_ids: list[str]) -> None:
        raise NotImplementedError

    @abstractmethod
    def unlink(self, owner_id: str, game_ids: list[str]) -> None:
        raise NotImplementedError


class LikeRepository(ABC):
    """Port for per-user likes on one entity type."""

    @abstractmethod
    def add_like(self, target_id: str, user_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_like(self, target_id: str, user_id: str) -> int:
        """Remove the like and return how many rows were removed."""
        raise NotImplementedError

    @abstractmethod
    def count_likes(self, target_id: str) -> int:
        raise NotImplementedError


class ReviewRepository(EntityRepository[Review], LikeRepository):
    """Port for reviews: plain CRUD plus likes."""

    @abstractmethod
    def find_top_for_game(self, game_id: str, limit: int) -> list[Review]:
        """Return the game's most liked reviews, newest first on ties."""
        raise NotImplementedError


class CommentRepository(SoftDeleteRepository[Comment], LikeRepository):
    """Port for comments: soft deletion plus likes."""


class PlaylistRepository(SoftDeleteRepository[Playlist], LikeRepository):
    """Port for playlists: soft deletion plus visibility, likes and games."""

    @abstractmethod
    def find_visible(
        self, viewer_id: Optional[str], playlist_id: Optional[str] = None
    ) -> list[Playlist]:
        """Return active playlists the viewer may see.

        Args:
            viewer_id: User id of the caller, or None for anonymous callers.
            playlist_id: Restrict the lookup to a single playlist.
        """
        raise NotImplementedError

    @abstractmethod
    def get_games(self, playlist_id: str) -> list[PlaylistGame]:
        """Return the playlist's games ordered by position."""
        raise NotImplementedError

    @abstractmethod
    def max_order(self, playlist_id: str) -> Optional[int]:
        """Return the highest position used in the playlist, or None if empty."""
        raise NotImplementedError

    @abstractmethod
    def add_games(self, playlist_id: str, entries: list[PlaylistGame]) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_games(self, playlist_id: str, game_ids: list[str]) -> int:
        """Remove the games and return how many rows were removed."""
        raise NotImplementedError

    @abstractmethod
    def move_game(self, playlist_id: str, game_id: str, order: int) -> bool:
        """Move a game to ``order``, shifting the games in between by one.

        Runs in a single transaction. Returns False when the game is not
        in the playlist.
        """
        raise NotImplementedError
