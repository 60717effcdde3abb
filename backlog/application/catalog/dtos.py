"""
Data Transfer Objects for the catalog application layer.

Commands carry validated input from the interface layer into the
procedures. They are plain dataclasses with no behavior; their field
names match the storage columns they populate.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from backlog.domain.catalog.entities import (
    Comment,
    Developer,
    Feature,
    Franchise,
    Game,
    Genre,
    Platform,
    PlaylistType,
    Publisher,
    Review,
    Visibility,
)


@dataclass(frozen=True)
class FranchiseCommand:
    """Field set for creating or updating a franchise."""

    name: str
    description: str
    background_image: str


@dataclass(frozen=True)
class PublisherCommand:
    """Field set for creating or updating a publisher."""

    name: str
    description: str
    cover_image: str


@dataclass(frozen=True)
class DeveloperCommand:
    name: str
    description: str
    image: str


@dataclass(frozen=True)
class GenreCommand:
    name: str
    description: str


@dataclass(frozen=True)
class PlatformCommand:
    name: str
    description: str
    image: str


@dataclass(frozen=True)
class FeatureCommand:
    name: str
    description: str
    image: str


@dataclass(frozen=True)
class GameCommand:
    """Field set for creating or updating a game.

    Attributes:
        franchise_id: Must reference an existing franchise.
        publisher_id: Must reference an existing publisher.
    """

    name: str
    description: str
    cover_image: str
    background_image: str
    release_date: date
    franchise_id: str
    publisher_id: str


@dataclass(frozen=True)
class CreatePlaylistCommand:
    name: str
    visibility: Visibility
    type: PlaylistType = PlaylistType.CUSTOM
    description: Optional[str] = None


@dataclass(frozen=True)
class UpdatePlaylistCommand:
    """Partial playlist update. Fields left as None are not touched."""

    name: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[Visibility] = None


@dataclass(frozen=True)
class CreateReviewCommand:
    game_id: str
    rating: int
    content: str


@dataclass(frozen=True)
class UpdateReviewCommand:
    rating: int
    content: str


@dataclass(frozen=True)
class CreateCommentCommand:
    review_id: str
    content: str
    parent_id: Optional[str] = None


@dataclass(frozen=True)
class UpdateCommentCommand:
    content: str


@dataclass(frozen=True)
class LinkedGames:
    """A catalog entity (developer, genre, platform, feature) with its games."""

    entity: Any
    games: list[Game] = field(default_factory=list)


@dataclass(frozen=True)
class LikeSummary:
    """A likeable row together with its current like count."""

    entity: Any
    like_count: int


@dataclass(frozen=True)
class CommentDetails:
    """A comment with its like count, its parent and its active direct replies.

    ``parent`` is None for top-level comments and for replies whose parent
    has been deleted.
    """

    comment: Comment
    like_count: int = 0
    parent: Optional[Comment] = None
    replies: list[Comment] = field(default_factory=list)


@dataclass(frozen=True)
class GameDetails:
    """Everything a game page shows.

    Attributes:
        top_reviews: Up to four reviews, most liked first.
    """

    game: Game
    franchise: Optional[Franchise]
    publisher: Optional[Publisher]
    developers: list[Developer] = field(default_factory=list)
    genres: list[Genre] = field(default_factory=list)
    platforms: list[Platform] = field(default_factory=list)
    features: list[Feature] = field(default_factory=list)
    review_count: int = 0
    top_reviews: list[Review] = field(default_factory=list)
