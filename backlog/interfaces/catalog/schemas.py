"""
Pydantic schemas for catalog API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here. Item schemas read straight from the
domain dataclasses (``from_attributes``).
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backlog.domain.catalog.entities import PlaylistType, Visibility

NAME_MAX_LEN = 255
TEXT_MAX_LEN = 191
ID_MAX_LEN = 36


def _name(max_length: int = NAME_MAX_LEN):
    return Field(..., min_length=1, max_length=max_length, description="Display name")


def _description(max_length: int = NAME_MAX_LEN):
    return Field(..., min_length=1, max_length=max_length, description="Short description")


def _image(description: str = "Image URL"):
    return Field(..., min_length=1, max_length=NAME_MAX_LEN, description=description)


class ItemSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ── Requests ─────────────────────────────────────────────────────────


class FranchiseRequest(BaseModel):
    """Create / update payload for a franchise."""

    name: str = _name()
    description: str = _description()
    background_image: str = _image("Background image URL")


class PublisherRequest(BaseModel):
    """Create / update payload for a publisher."""

    name: str = _name()
    description: str = _description()
    cover_image: str = _image("Cover image URL")


class DeveloperRequest(BaseModel):
    name: str = _name(TEXT_MAX_LEN)
    description: str = _description(TEXT_MAX_LEN)
    image: str = _image()


class GenreRequest(BaseModel):
    name: str = _name(TEXT_MAX_LEN)
    description: str = _description(TEXT_MAX_LEN)


class PlatformRequest(BaseModel):
    name: str = _name(TEXT_MAX_LEN)
    description: str = _description(TEXT_MAX_LEN)
    image: str = _image()


class FeatureRequest(BaseModel):
    name: str = _name(TEXT_MAX_LEN)
    description: str = _description(TEXT_MAX_LEN)
    image: str = _image()


class GameRequest(BaseModel):
    """Create / update payload for a game.

    Attributes:
        franchise_id: Existing franchise identifier.
        publisher_id: Existing publisher identifier.
    """

    name: str = _name(TEXT_MAX_LEN)
    description: str = _description(TEXT_MAX_LEN)
    cover_image: str = _image("Cover image URL")
    background_image: str = _image("Background image URL")
    release_date: date
    franchise_id: str = Field(..., min_length=1, max_length=ID_MAX_LEN)
    publisher_id: str = Field(..., min_length=1, max_length=ID_MAX_LEN)


class GameIdsRequest(BaseModel):
    """A batch of game identifiers to link or unlink."""

    game_ids: list[str] = Field(..., min_length=1)


class PlaylistOrderRequest(BaseModel):
    """New zero-based position of a game inside a playlist."""

    order: int = Field(..., ge=0)


class CreatePlaylistRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    type: PlaylistType = PlaylistType.CUSTOM
    visibility: Visibility


class UpdatePlaylistRequest(BaseModel):
    """Partial update; omitted fields stay unchanged."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    visibility: Optional[Visibility] = None


class CreateReviewRequest(BaseModel):
    game_id: str = Field(..., min_length=1, max_length=ID_MAX_LEN)
    rating: int = Field(..., ge=1, le=5)
    content: str = Field(..., min_length=1, description="Review text")


class UpdateReviewRequest(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    content: str = Field(..., min_length=1)


class CreateCommentRequest(BaseModel):
    review_id: str = Field(..., min_length=1, max_length=ID_MAX_LEN)
    content: str = Field(..., min_length=1)
    parent_id: Optional[str] = Field(default=None, max_length=ID_MAX_LEN)


class UpdateCommentRequest(BaseModel):
    content: str = Field(..., min_length=1)


# ── Items ────────────────────────────────────────────────────────────


class FranchiseItem(ItemSchema):
    id: str
    name: str
    description: str
    background_image: str
    created_at: datetime
    updated_at: datetime


class PublisherItem(ItemSchema):
    id: str
    name: str
    description: str
    cover_image: str
    created_at: datetime
    updated_at: datetime


class DeveloperItem(ItemSchema):
    id: str
    name: str
    description: str
    image: str
    created_at: datetime
    updated_at: datetime


class GenreItem(ItemSchema):
    id: str
    name: str
    description: str
    created_at: datetime
    updated_at: datetime


class PlatformItem(ItemSchema):
    id: str
    name: str
    description: str
    image: str
    created_at: datetime
    updated_at: datetime


class FeatureItem(ItemSchema):
    id: str
    name: str
    description: str
    image: str
    created_at: datetime
    updated_at: datetime


class GameItem(ItemSchema):
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


class DeveloperGamesItem(ItemSchema):
    entity: DeveloperItem
    games: list[GameItem]


class GenreGamesItem(ItemSchema):
    entity: GenreItem
    games: list[GameItem]


class PlatformGamesItem(ItemSchema):
    entity: PlatformItem
    games: list[GameItem]


class FeatureGamesItem(ItemSchema):
    entity: FeatureItem
    games: list[GameItem]


class PlaylistItem(ItemSchema):
    id: str
    name: str
    description: Optional[str] = None
    type: PlaylistType
    visibility: Visibility
    user_id: str
    created_at: datetime
    updated_at: datetime
    deleted: Optional[datetime] = None


class PlaylistGameItem(ItemSchema):
    game_id: str
    order: int
    added_at: datetime


class PlaylistDetailsItem(ItemSchema):
    playlist: PlaylistItem
    games: list[PlaylistGameItem]
    like_count: int


class ReviewItem(ItemSchema):
    id: str
    game_id: str
    user_id: str
    rating: int
    content: str
    created_at: datetime
    updated_at: datetime


class CommentItem(ItemSchema):
    id: str
    review_id: str
    parent_id: Optional[str] = None
    user_id: str
    content: str
    created_at: datetime
    updated_at: datetime


class ReviewLikesItem(ItemSchema):
    entity: ReviewItem
    like_count: int


class CommentLikesItem(ItemSchema):
    entity: CommentItem
    like_count: int


class CommentDetailsItem(ItemSchema):
    comment: CommentItem
    like_count: int
    parent: Optional[CommentItem] = None
    replies: list[CommentItem]


class GameDetailsItem(ItemSchema):
    """Game page payload; ``top_reviews`` holds at most four reviews."""

    game: GameItem
    franchise: Optional[FranchiseItem] = None
    publisher: Optional[PublisherItem] = None
    developers: list[DeveloperItem]
    genres: list[GenreItem]
    platforms: list[PlatformItem]
    features: list[FeatureItem]
    review_count: int
    top_reviews: list[ReviewItem]


# ── Envelopes ────────────────────────────────────────────────────────


class ProcedureErrorSchema(BaseModel):
    code: str
    message: str


class ErrResponse(BaseModel):
    """Failure variant of the result envelope."""

    ok: bool = False
    error: ProcedureErrorSchema


class ErrorResponse(BaseModel):
    """Body of 401 / 403 / 429 / 500 responses raised outside procedures."""

    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    database: str
