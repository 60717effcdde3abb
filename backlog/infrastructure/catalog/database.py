"""
Storage client.

Owns the SQLAlchemy engine and the repositories built on it. One
instance is created per process by the application factory and handed
to procedures through dependency injection.
"""

import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from backlog.core.config import Settings
from backlog.domain.catalog.entities import (
    Developer,
    Feature,
    Franchise,
    Game,
    Genre,
    Platform,
    Publisher,
)
from backlog.infrastructure.catalog.community_repository import (
    CommentRepositoryAdapter,
    ReviewRepositoryAdapter,
)
from backlog.infrastructure.catalog.game_links_repository import GameLinkRepositoryAdapter
from backlog.infrastructure.catalog.playlist_repository import PlaylistRepositoryAdapter
from backlog.infrastructure.catalog.sql_repository import SqlRepository
from backlog.infrastructure.catalog import tables

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for the configured store.

    SQLite gets foreign key enforcement; in-memory SQLite shares one
    connection so every session sees the same data.
    """
    kwargs: dict = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(database_url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class Database:
    """Entry point to every catalog repository.

    Args:
        engine: Engine shared by all repositories.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.franchises = SqlRepository(engine, tables.franchises, Franchise)
        self.publishers = SqlRepository(engine, tables.publishers, Publisher)
        self.developers = SqlRepository(engine, tables.developers, Developer)
        self.genres = SqlRepository(engine, tables.genres, Genre)
        self.platforms = SqlRepository(engine, tables.platforms, Platform)
        self.features = SqlRepository(engine, tables.features, Feature)
        self.games = SqlRepository(engine, tables.games, Game)
        self.developer_games = GameLinkRepositoryAdapter(
            engine, tables.game_developers, tables.developers, "developer_id", Developer
        )
        self.genre_games = GameLinkRepositoryAdapter(
            engine, tables.game_genres, tables.genres, "genre_id", Genre
        )
        self.platform_games = GameLinkRepositoryAdapter(
            engine, tables.game_platforms, tables.platforms, "platform_id", Platform
        )
        self.feature_games = GameLinkRepositoryAdapter(
            engine, tables.game_features, tables.features, "feature_id", Feature
        )
        self.playlists = PlaylistRepositoryAdapter(engine)
        self.reviews = ReviewRepositoryAdapter(engine)
        self.comments = CommentRepositoryAdapter(engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the storage client from application settings."""
        return cls(build_engine(settings.database_url, echo=settings.database_echo))

    def create_all(self) -> None:
        """Create any missing tables."""
        tables.metadata.create_all(self.engine)
        logger.info("Database tables ready")

    def ping(self) -> bool:
        """Run SELECT 1 and report whether the store answered."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception:
            logger.exception("Database ping failed")
            return False
        return True

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()
        logger.info("Database engine disposed")
