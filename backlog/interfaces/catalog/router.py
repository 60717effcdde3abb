"""
FastAPI routers for the catalog entities.

All routes delegate to procedures. No business logic here.
Input validation is handled by Pydantic schemas.
Gate errors are mapped by centralized error handlers; business
failures arrive as Results and are rendered by ``result_response``.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backlog.application.catalog.dtos import (
    DeveloperCommand,
    FeatureCommand,
    FranchiseCommand,
    GameCommand,
    GenreCommand,
    PlatformCommand,
    PublisherCommand,
)
from backlog.application.catalog.game import GameProcedures
from backlog.domain.catalog.entities import Session
from backlog.interfaces.catalog.crud import add_crud_routes, add_game_link_routes
from backlog.interfaces.catalog.dependencies import (
    get_developer_procedures,
    get_feature_procedures,
    get_franchise_procedures,
    get_game_procedures,
    get_genre_procedures,
    get_platform_procedures,
    get_publisher_procedures,
    get_session,
)
from backlog.interfaces.catalog.responses import ERR_RESPONSES, result_response
from backlog.interfaces.catalog.schemas import (
    DeveloperGamesItem,
    DeveloperItem,
    DeveloperRequest,
    FeatureGamesItem,
    FeatureItem,
    FeatureRequest,
    FranchiseItem,
    FranchiseRequest,
    GameDetailsItem,
    GameItem,
    GameRequest,
    GenreGamesItem,
    GenreItem,
    GenreRequest,
    PlatformGamesItem,
    PlatformItem,
    PlatformRequest,
    PublisherItem,
    PublisherRequest,
    ReviewItem,
)

franchise_router = add_crud_routes(
    APIRouter(prefix="/franchises", tags=["franchises"]),
    label="franchise",
    get_procedures=get_franchise_procedures,
    item_schema=FranchiseItem,
    create_schema=FranchiseRequest,
    to_command=lambda body: FranchiseCommand(**body.model_dump()),
)

publisher_router = add_crud_routes(
    APIRouter(prefix="/publishers", tags=["publishers"]),
    label="publisher",
    get_procedures=get_publisher_procedures,
    item_schema=PublisherItem,
    create_schema=PublisherRequest,
    to_command=lambda body: PublisherCommand(**body.model_dump()),
)

# ── Entities linked to games ─────────────────────────────────────────


def _linked_router(prefix, label, get_procedures, item_schema, linked_schema, request, command):
    router = APIRouter(prefix=prefix, tags=[f"{label}s"])
    add_game_link_routes(
        router, label=label, get_procedures=get_procedures, linked_schema=linked_schema
    )
    return add_crud_routes(
        router,
        label=label,
        get_procedures=get_procedures,
        item_schema=item_schema,
        create_schema=request,
        to_command=lambda body: command(**body.model_dump()),
    )


developer_router = _linked_router(
    "/developers",
    "developer",
    get_developer_procedures,
    DeveloperItem,
    DeveloperGamesItem,
    DeveloperRequest,
    DeveloperCommand,
)
genre_router = _linked_router(
    "/genres", "genre", get_genre_procedures, GenreItem, GenreGamesItem, GenreRequest, GenreCommand
)
platform_router = _linked_router(
    "/platforms",
    "platform",
    get_platform_procedures,
    PlatformItem,
    PlatformGamesItem,
    PlatformRequest,
    PlatformCommand,
)
feature_router = _linked_router(
    "/features",
    "feature",
    get_feature_procedures,
    FeatureItem,
    FeatureGamesItem,
    FeatureRequest,
    FeatureCommand,
)

# ── Games ────────────────────────────────────────────────────────────

game_router = APIRouter(prefix="/games", tags=["games"])


@game_router.get(
    "/{game_id}/details",
    summary="Get a game page",
    responses=ERR_RESPONSES,
)
def get_game_details(
    game_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: GameProcedures = Depends(get_game_procedures),
) -> JSONResponse:
    """Return the game with its franchise, publisher, links and top reviews."""
    return result_response(procedures.get_details(session, game_id), GameDetailsItem)


@game_router.get(
    "/{game_id}/developers",
    summary="List a game's developers",
    responses=ERR_RESPONSES,
)
def get_game_developers(
    game_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: GameProcedures = Depends(get_game_procedures),
) -> JSONResponse:
    return result_response(procedures.get_developers(session, game_id), DeveloperItem)


@game_router.get(
    "/{game_id}/genres",
    summary="List a game's genres",
    responses=ERR_RESPONSES,
)
def get_game_genres(
    game_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: GameProcedures = Depends(get_game_procedures),
) -> JSONResponse:
    return result_response(procedures.get_genres(session, game_id), GenreItem)


@game_router.get(
    "/{game_id}/platforms",
    summary="List a game's platforms",
    responses=ERR_RESPONSES,
)
def get_game_platforms(
    game_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: GameProcedures = Depends(get_game_procedures),
) -> JSONResponse:
    return result_response(procedures.get_platforms(session, game_id), PlatformItem)


@game_router.get(
    "/{game_id}/features",
    summary="List a game's features",
    responses=ERR_RESPONSES,
)
def get_game_features(
    game_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: GameProcedures = Depends(get_game_procedures),
) -> JSONResponse:
    return result_response(procedures.get_features(session, game_id), FeatureItem)


@game_router.get(
    "/{game_id}/reviews",
    summary="List a game's reviews",
    responses=ERR_RESPONSES,
)
def get_game_reviews(
    game_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: GameProcedures = Depends(get_game_procedures),
) -> JSONResponse:
    return result_response(procedures.get_reviews(session, game_id), ReviewItem)


add_crud_routes(
    game_router,
    label="game",
    get_procedures=get_game_procedures,
    item_schema=GameItem,
    create_schema=GameRequest,
    to_command=lambda body: GameCommand(**body.model_dump()),
)

routers = [
    franchise_router,
    publisher_router,
    developer_router,
    genre_router,
    platform_router,
    feature_router,
    game_router,
]
