"""
Route factory for the five CRUD procedures.

Every catalog router exposes the same shape:

    GET    /            → get_all
    GET    /{id}        → get_by_id
    POST   /            → create (201)
    PUT    /{id}        → update
    DELETE /{id}        → delete

The game-link and like factories add the extra routes shared by several
entities:

    GET    /{id}/games  → get_games
    POST   /{id}/games  → add_games
    DELETE /{id}/games  → remove_games
    POST   /{id}/like   → like
    DELETE /{id}/like   → unlike

Routes only translate HTTP to procedure calls and Results to responses.
"""

from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from backlog.application.catalog.base import CrudProcedures
from backlog.application.catalog.linked import GameLinkedProcedures
from backlog.application.catalog.owned import OwnedCrudProcedures
from backlog.domain.catalog.entities import Session
from backlog.interfaces.catalog.dependencies import get_session
from backlog.interfaces.catalog.responses import ERR_RESPONSES, result_response
from backlog.interfaces.catalog.schemas import ErrorResponse, GameIdsRequest

GATE_RESPONSES = {
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
}


def add_crud_routes(
    router: APIRouter,
    *,
    label: str,
    get_procedures: Callable[..., CrudProcedures],
    item_schema: type[BaseModel],
    create_schema: type[BaseModel],
    update_schema: Optional[type[BaseModel]] = None,
    to_command: Callable[[BaseModel], Any],
    to_update_command: Optional[Callable[[BaseModel], Any]] = None,
) -> APIRouter:
    """Register the CRUD routes on ``router``.

    Args:
        router: Router the routes are added to.
        label: Human readable entity name used in summaries.
        get_procedures: Dependency building the procedure set.
        item_schema: Response schema for one entity.
        create_schema: Request body schema for create.
        update_schema: Request body schema for update (defaults to create_schema).
        to_command: Converts a validated create body into a procedure command.
        to_update_command: Same for update bodies (defaults to to_command).
    """
    update_body = update_schema or create_schema
    update_command = to_update_command or to_command

    @router.get("", summary=f"List {label}s", responses=ERR_RESPONSES)
    def get_all(
        session: Optional[Session] = Depends(get_session),
        procedures: CrudProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        return result_response(procedures.get_all(session), item_schema)

    @router.get("/{entity_id}", summary=f"Get a {label}", responses=ERR_RESPONSES)
    def get_by_id(
        entity_id: str,
        session: Optional[Session] = Depends(get_session),
        procedures: CrudProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        return result_response(procedures.get_by_id(session, entity_id), item_schema)

    @router.post(
        "",
        status_code=201,
        summary=f"Create a {label}",
        responses={**ERR_RESPONSES, **GATE_RESPONSES},
    )
    def create(
        body: create_schema,
        session: Optional[Session] = Depends(get_session),
        procedures: CrudProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        result = procedures.create(session, to_command(body))
        return result_response(result, item_schema, success_status=201)

    @router.put(
        "/{entity_id}",
        summary=f"Update a {label}",
        responses={**ERR_RESPONSES, **GATE_RESPONSES},
    )
    def update(
        entity_id: str,
        body: update_body,
        session: Optional[Session] = Depends(get_session),
        procedures: CrudProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        return result_response(
            procedures.update(session, entity_id, update_command(body)), item_schema
        )

    @router.delete(
        "/{entity_id}",
        summary=f"Delete a {label}",
        description="Returns the entity as it was immediately before deletion.",
        responses={**ERR_RESPONSES, **GATE_RESPONSES},
    )
    def delete(
        entity_id: str,
        session: Optional[Session] = Depends(get_session),
        procedures: CrudProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        return result_response(procedures.delete(session, entity_id), item_schema)

    return router


def add_game_link_routes(
    router: APIRouter,
    *,
    label: str,
    get_procedures: Callable[..., GameLinkedProcedures],
    linked_schema: type[BaseModel],
) -> APIRouter:
    """Register the ``/{id}/games`` routes on ``router``.

    Args:
        router: Router the routes are added to.
        label: Human readable entity name used in summaries.
        get_procedures: Dependency building the procedure set.
        linked_schema: Response schema for the entity with its games.
    """
    write_responses = {**ERR_RESPONSES, **GATE_RESPONSES}

    @router.get("/{entity_id}/games", summary=f"List a {label}'s games", responses=ERR_RESPONSES)
    def get_games(
        entity_id: str,
        session: Optional[Session] = Depends(get_session),
        procedures: GameLinkedProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        return result_response(procedures.get_games(session, entity_id), linked_schema)

    @router.post(
        "/{entity_id}/games", summary=f"Link games to a {label}", responses=write_responses
    )
    def add_games(
        entity_id: str,
        request: GameIdsRequest,
        session: Optional[Session] = Depends(get_session),
        procedures: GameLinkedProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        result = procedures.add_games(session, entity_id, request.game_ids)
        return result_response(result, linked_schema)

    @router.delete(
        "/{entity_id}/games", summary=f"Unlink games from a {label}", responses=write_responses
    )
    def remove_games(
        entity_id: str,
        request: GameIdsRequest,
        session: Optional[Session] = Depends(get_session),
        procedures: GameLinkedProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        result = procedures.remove_games(session, entity_id, request.game_ids)
        return result_response(result, linked_schema)

    return router


def add_like_routes(
    router: APIRouter,
    *,
    label: str,
    get_procedures: Callable[..., OwnedCrudProcedures],
    likes_schema: type[BaseModel],
) -> APIRouter:
    """Register ``POST`` and ``DELETE /{id}/like`` on ``router``."""
    write_responses = {**ERR_RESPONSES, **GATE_RESPONSES}

    @router.post("/{entity_id}/like", summary=f"Like a {label}", responses=write_responses)
    def like(
        entity_id: str,
        session: Optional[Session] = Depends(get_session),
        procedures: OwnedCrudProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        return result_response(procedures.like(session, entity_id), likes_schema)

    @router.delete("/{entity_id}/like", summary=f"Unlike a {label}", responses=write_responses)
    def unlike(
        entity_id: str,
        session: Optional[Session] = Depends(get_session),
        procedures: OwnedCrudProcedures = Depends(get_procedures),
    ) -> JSONResponse:
        return result_response(procedures.unlike(session, entity_id), likes_schema)

    return router
