"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
Identifiers are assigned once at creation and never change.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Role carried by an authenticated session."""

    ADMIN = "Admin"
    USER = "User"


class Visibility(str, Enum):
    """Who may see a playlist."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    FOLLOWERS_ONLY = "FOLLOWERS_ONLY"


class PlaylistType(str, Enum):
    """Built-in playlist kinds."""

    BACKLOG = "BACKLOG"
    LIKED = "LIKED"
    COMPLETED = "COMPLETED"
    PLAYING = "PLAYING"
    DROPPED = "DROPPED"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class Session:
    """An authenticated caller."""

    user_id: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class Franchise:
    """A game franchise (e.g. a long-running series)."""

    id: str
    name: str
    description: str
    background_image: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Publisher:
    """A game publisher."""

    id: str
    name: str
    description: str
    cover_image: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Developer:
    """A game development studio."""

    id: str
    name: str
    description: str
    image: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Genre:
    id: str
    name: str
    description: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Platform:
    id: str
    name: str
    description: str
    image: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Feature:
    """A gameplay feature such as co-op or cross-save."""

    id: str
    name: str
    description: str
    image: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Game:
    """A single game, attached to one franchise and one publisher."""

    id: str
    name: str
    description: str
    cover_image: str
    background_image: str
    release_date: date
    franchise_id: str
    publisher_id: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PlaylistGame:
    """Position of a game inside a playlist."""

    game_id: str
    order: int
    added_at: datetime


@dataclass(frozen=True)
class Playlist:
    """A user-owned, soft-deletable list of games.

    ``deleted`` is None while the playlist is active.
    """

    id: str
    name: str
    type: PlaylistType
    visibility: Visibility
    user_id: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    deleted: Optional[datetime] = None


@dataclass(frozen=True)
class PlaylistDetails:
    """A playlist together with its ordered games and like count."""

    playlist: Playlist
    games: list[PlaylistGame] = field(default_factory=list)
    like_count: int = 0


@dataclass(frozen=True)
class Review:
    id: str
    game_id: str
    user_id: str
    rating: int
    content: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Comment:
    """A soft-deletable comment on a review, optionally replying to another comment."""

    id: str
    review_id: str
    user_id: str
    content: str
    created_at: datetime
    updated_at: datetime
    parent_id: Optional[str] = None
    deleted: Optional[datetime] = None
