"""
FastAPI router for playlists.

CRUD plus likes, game membership and order, details and the admin-only view of
soft-deleted playlists. No business logic here.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backlog.application.catalog.dtos import CreatePlaylistCommand, UpdatePlaylistCommand
from backlog.application.catalog.playlist import PlaylistProcedures
from backlog.domain.catalog.entities import Session
from backlog.interfaces.catalog.crud import GATE_RESPONSES, add_crud_routes
from backlog.interfaces.catalog.dependencies import get_playlist_procedures, get_session
from backlog.interfaces.catalog.responses import ERR_RESPONSES, result_response
from backlog.interfaces.catalog.schemas import (
    CreatePlaylistRequest,
    GameIdsRequest,
    PlaylistDetailsItem,
    PlaylistItem,
    PlaylistOrderRequest,
    UpdatePlaylistRequest,
)

router = APIRouter(prefix="/playlists", tags=["playlists"])

WRITE_RESPONSES = {**ERR_RESPONSES, **GATE_RESPONSES}


@router.get(
    "/deleted",
    summary="List soft-deleted playlists",
    description="Admin only. Bypasses the default active-only filter.",
    responses=WRITE_RESPONSES,
)
def get_deleted_playlists(
    session: Optional[Session] = Depends(get_session),
    procedures: PlaylistProcedures = Depends(get_playlist_procedures),
) -> JSONResponse:
    return result_response(procedures.get_deleted(session), PlaylistItem)


@router.get(
    "/{playlist_id}/details",
    summary="Get a playlist with its games",
    responses=ERR_RESPONSES,
)
def get_playlist_details(
    playlist_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: PlaylistProcedures = Depends(get_playlist_procedures),
) -> JSONResponse:
    return result_response(procedures.get_details(session, playlist_id), PlaylistDetailsItem)


@router.post("/{playlist_id}/like", summary="Like a playlist", responses=WRITE_RESPONSES)
def like_playlist(
    playlist_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: PlaylistProcedures = Depends(get_playlist_procedures),
) -> JSONResponse:
    return result_response(procedures.like(session, playlist_id), PlaylistDetailsItem)


@router.delete("/{playlist_id}/like", summary="Unlike a playlist", responses=WRITE_RESPONSES)
def unlike_playlist(
    playlist_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: PlaylistProcedures = Depends(get_playlist_procedures),
) -> JSONResponse:
    return result_response(procedures.unlike(session, playlist_id), PlaylistDetailsItem)


@router.post(
    "/{playlist_id}/games",
    summary="Append games to a playlist",
    responses=WRITE_RESPONSES,
)
def add_playlist_games(
    playlist_id: str,
    request: GameIdsRequest,
    session: Optional[Session] = Depends(get_session),
    procedures: PlaylistProcedures = Depends(get_playlist_procedures),
) -> JSONResponse:
    result = procedures.add_games(session, playlist_id, request.game_ids)
    return result_response(result, PlaylistDetailsItem)


@router.delete(
    "/{playlist_id}/games",
    summary="Remove games from a playlist",
    responses=WRITE_RESPONSES,
)
def remove_playlist_games(
    playlist_id: str,
    request: GameIdsRequest,
    session: Optional[Session] = Depends(get_session),
    procedures: PlaylistProcedures = Depends(get_playlist_procedures),
) -> JSONResponse:
    result = procedures.remove_games(session, playlist_id, request.game_ids)
    return result_response(result, PlaylistDetailsItem)


@router.put(
    "/{playlist_id}/games/{game_id}/order",
    summary="Move a game inside a playlist",
    description="Games between the old and new position shift by one.",
    responses=WRITE_RESPONSES,
)
def update_playlist_order(
    playlist_id: str,
    game_id: str,
    request: PlaylistOrderRequest,
    session: Optional[Session] = Depends(get_session),
    procedures: PlaylistProcedures = Depends(get_playlist_procedures),
) -> JSONResponse:
    result = procedures.update_order(session, playlist_id, game_id, request.order)
    return result_response(result, PlaylistDetailsItem)


add_crud_routes(
    router,
    label="playlist",
    get_procedures=get_playlist_procedures,
    item_schema=PlaylistItem,
    create_schema=CreatePlaylistRequest,
    update_schema=UpdatePlaylistRequest,
    to_command=lambda body: CreatePlaylistCommand(**body.model_dump()),
    to_update_command=lambda body: UpdatePlaylistCommand(**body.model_dump()),
)
