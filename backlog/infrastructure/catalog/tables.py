"""SQLAlchemy Core table definitions for the catalog.

These Table objects are used by the repositories to construct typed,
parameterized SQL. They are NOT an ORM: there is no object mapping,
identity map, or lazy loading. Column names match the domain entity
fields one to one, so a row mapping can be splatted into an entity.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.types import TypeDecorator

from backlog.domain.catalog.entities import PlaylistType, Visibility

ID_LENGTH = 36
NAME_LENGTH = 255

metadata = MetaData()


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime that always comes back in UTC.

    SQLite drops tzinfo on the way out; this puts it back.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def _id_column() -> Column:
    return Column("id", String(ID_LENGTH), primary_key=True)


def _timestamps() -> list[Column]:
    return [
        Column("created_at", UTCDateTime, nullable=False),
        Column("updated_at", UTCDateTime, nullable=False),
    ]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Catalog
# ============================================================================

franchises = Table(
    "franchises",
    metadata,
    _id_column(),
    Column("name", String(NAME_LENGTH), unique=True, nullable=False),
    Column("description", String(NAME_LENGTH), nullable=False),
    Column("background_image", String(NAME_LENGTH), nullable=False),
    *_timestamps(),
)

publishers = Table(
    "publishers",
    metadata,
    _id_column(),
    Column("name", String(NAME_LENGTH), unique=True, nullable=False),
    Column("description", String(NAME_LENGTH), nullable=False),
    Column("cover_image", String(NAME_LENGTH), nullable=False),
    *_timestamps(),
)

developers = Table(
    "developers",
    metadata,
    _id_column(),
    Column("name", String(NAME_LENGTH), unique=True, nullable=False),
    Column("description", String(NAME_LENGTH), nullable=False),
    Column("image", String(NAME_LENGTH), nullable=False),
    *_timestamps(),
)

genres = Table(
    "genres",
    metadata,
    _id_column(),
    Column("name", String(NAME_LENGTH), unique=True, nullable=False),
    Column("description", String(NAME_LENGTH), nullable=False),
    *_timestamps(),
)

platforms = Table(
    "platforms",
    metadata,
    _id_column(),
    Column("name", String(NAME_LENGTH), unique=True, nullable=False),
    Column("description", String(NAME_LENGTH), nullable=False),
    Column("image", String(NAME_LENGTH), nullable=False),
    *_timestamps(),
)

features = Table(
    "features",
    metadata,
    _id_column(),
    Column("name", String(NAME_LENGTH), unique=True, nullable=False),
    Column("description", String(NAME_LENGTH), nullable=False),
    Column("image", String(NAME_LENGTH), nullable=False),
    *_timestamps(),
)

games = Table(
    "games",
    metadata,
    _id_column(),
    Column("name", String(NAME_LENGTH), nullable=False),
    Column("description", String(NAME_LENGTH), nullable=False),
    Column("cover_image", String(NAME_LENGTH), nullable=False),
    Column("background_image", String(NAME_LENGTH), nullable=False),
    Column("release_date", Date, nullable=False),
    Column("franchise_id", String(ID_LENGTH), ForeignKey("franchises.id"), nullable=False),
    Column("publisher_id", String(ID_LENGTH), ForeignKey("publishers.id"), nullable=False),
    *_timestamps(),
)


def _game_link_table(name: str, owner_table: str, owner_column: str) -> Table:
    """Many-to-many link between games and one catalog table.

    Both sides cascade, so deleting either end removes the link rows.
    """
    return Table(
        name,
        metadata,
        Column(
            "game_id",
            String(ID_LENGTH),
            ForeignKey("games.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        Column(
            owner_column,
            String(ID_LENGTH),
            ForeignKey(f"{owner_table}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


game_developers = _game_link_table("game_developers", "developers", "developer_id")
game_genres = _game_link_table("game_genres", "genres", "genre_id")
game_platforms = _game_link_table("game_platforms", "platforms", "platform_id")
game_features = _game_link_table("game_features", "features", "feature_id")

# ============================================================================
# User content
# ============================================================================

playlists = Table(
    "playlists",
    metadata,
    _id_column(),
    Column("name", String(100), nullable=False),
    Column("description", String(500)),
    Column("type", Enum(PlaylistType, native_enum=False, length=20), nullable=False),
    Column("visibility", Enum(Visibility, native_enum=False, length=20), nullable=False),
    Column("user_id", String(ID_LENGTH), nullable=False, index=True),
    *_timestamps(),
    Column("deleted", UTCDateTime),
)

playlist_games = Table(
    "playlist_games",
    metadata,
    Column(
        "playlist_id",
        String(ID_LENGTH),
        ForeignKey("playlists.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "game_id",
        String(ID_LENGTH),
        ForeignKey("games.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("order", Integer, nullable=False),
    Column("added_at", UTCDateTime, nullable=False),
)

reviews = Table(
    "reviews",
    metadata,
    _id_column(),
    Column(
        "game_id",
        String(ID_LENGTH),
        ForeignKey("games.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(ID_LENGTH), nullable=False, index=True),
    Column("rating", Integer, nullable=False),
    Column("content", Text, nullable=False),
    *_timestamps(),
)

comments = Table(
    "comments",
    metadata,
    _id_column(),
    Column(
        "review_id",
        String(ID_LENGTH),
        ForeignKey("reviews.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("parent_id", String(ID_LENGTH), ForeignKey("comments.id", ondelete="CASCADE")),
    Column("user_id", String(ID_LENGTH), nullable=False, index=True),
    Column("content", Text, nullable=False),
    *_timestamps(),
    Column("deleted", UTCDateTime),
)


def _like_table(name: str, target_table: str, target_column: str) -> Table:
    """One row per (target, user); the pair is the primary key."""
    return Table(
        name,
        metadata,
        Column(
            target_column,
            String(ID_LENGTH),
            ForeignKey(f"{target_table}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        Column("user_id", String(ID_LENGTH), primary_key=True),
        Column("created_at", UTCDateTime, nullable=False),
    )


playlist_likes = _like_table("playlist_likes", "playlists", "playlist_id")
review_likes = _like_table("review_likes", "reviews", "review_id")
comment_likes = _like_table("comment_likes", "comments", "comment_id")
