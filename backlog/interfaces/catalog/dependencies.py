"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire the process-wide
storage client into procedures via constructor injection, and resolve
the caller's session from the Authorization header.
"""

import logging
from typing import Optional

import jwt as pyjwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backlog.application.catalog.comment import CommentProcedures
from backlog.application.catalog.developer import DeveloperProcedures
from backlog.application.catalog.feature import FeatureProcedures
from backlog.application.catalog.franchise import FranchiseProcedures
from backlog.application.catalog.game import GameProcedures
from backlog.application.catalog.genre import GenreProcedures
from backlog.application.catalog.platform import PlatformProcedures
from backlog.application.catalog.playlist import PlaylistProcedures
from backlog.application.catalog.publisher import PublisherProcedures
from backlog.application.catalog.review import ReviewProcedures
from backlog.core.config import Settings
from backlog.domain.catalog.entities import Session
from backlog.infrastructure.catalog.database import Database
from backlog.shared.security.tokens import decode_session

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_database(request: Request) -> Database:
    """The storage client created once by the application factory."""
    return request.app.state.database


def get_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Optional[Session]:
    """Resolve the caller's session.

    A missing or invalid token yields None; the authorization gate decides
    whether the procedure accepts anonymous callers.
    """
    if credentials is None:
        return None
    try:
        return decode_session(
            credentials.credentials,
            settings.auth_secret,
            algorithm=settings.auth_algorithm,
            audience=settings.auth_audience,
        )
    except (pyjwt.InvalidTokenError, ValueError) as exc:
        logger.warning("Ignoring invalid session token: %s", type(exc).__name__)
        return None


def get_franchise_procedures(db: Database = Depends(get_database)) -> FranchiseProcedures:
    return FranchiseProcedures(db.franchises)


def get_publisher_procedures(db: Database = Depends(get_database)) -> PublisherProcedures:
    return PublisherProcedures(db.publishers)


def get_developer_procedures(db: Database = Depends(get_database)) -> DeveloperProcedures:
    return DeveloperProcedures(db.developers, db.developer_games)


def get_genre_procedures(db: Database = Depends(get_database)) -> GenreProcedures:
    return GenreProcedures(db.genres, db.genre_games)


def get_platform_procedures(db: Database = Depends(get_database)) -> PlatformProcedures:
    return PlatformProcedures(db.platforms, db.platform_games)


def get_feature_procedures(db: Database = Depends(get_database)) -> FeatureProcedures:
    return FeatureProcedures(db.features, db.feature_games)


def get_game_procedures(db: Database = Depends(get_database)) -> GameProcedures:
    return GameProcedures(
        db.games,
        franchises=db.franchises,
        publishers=db.publishers,
        developer_games=db.developer_games,
        genre_games=db.genre_games,
        platform_games=db.platform_games,
        feature_games=db.feature_games,
        reviews=db.reviews,
    )


def get_playlist_procedures(db: Database = Depends(get_database)) -> PlaylistProcedures:
    return PlaylistProcedures(db.playlists)


def get_review_procedures(db: Database = Depends(get_database)) -> ReviewProcedures:
    return ReviewProcedures(db.reviews)


def get_comment_procedures(db: Database = Depends(get_database)) -> CommentProcedures:
    return CommentProcedures(db.comments)
