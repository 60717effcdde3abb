"""FastAPI routers for reviews and comments."""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backlog.application.catalog.comment import CommentProcedures
from backlog.application.catalog.dtos import (
    CreateCommentCommand,
    CreateReviewCommand,
    UpdateCommentCommand,
    UpdateReviewCommand,
)
from backlog.domain.catalog.entities import Session
from backlog.interfaces.catalog.crud import add_crud_routes, add_like_routes
from backlog.interfaces.catalog.dependencies import (
    get_comment_procedures,
    get_review_procedures,
    get_session,
)
from backlog.interfaces.catalog.responses import ERR_RESPONSES, result_response
from backlog.interfaces.catalog.schemas import (
    CommentDetailsItem,
    CommentItem,
    CommentLikesItem,
    CreateCommentRequest,
    CreateReviewRequest,
    ReviewItem,
    ReviewLikesItem,
    UpdateCommentRequest,
    UpdateReviewRequest,
)

review_router = APIRouter(prefix="/reviews", tags=["reviews"])

add_like_routes(
    review_router,
    label="review",
    get_procedures=get_review_procedures,
    likes_schema=ReviewLikesItem,
)
add_crud_routes(
    review_router,
    label="review",
    get_procedures=get_review_procedures,
    item_schema=ReviewItem,
    create_schema=CreateReviewRequest,
    update_schema=UpdateReviewRequest,
    to_command=lambda body: CreateReviewCommand(**body.model_dump()),
    to_update_command=lambda body: UpdateReviewCommand(**body.model_dump()),
)

comment_router = APIRouter(prefix="/comments", tags=["comments"])


@comment_router.get(
    "/{comment_id}/details",
    summary="Get a comment with its parent and replies",
    responses=ERR_RESPONSES,
)
def get_comment_details(
    comment_id: str,
    session: Optional[Session] = Depends(get_session),
    procedures: CommentProcedures = Depends(get_comment_procedures),
) -> JSONResponse:
    return result_response(procedures.get_details(session, comment_id), CommentDetailsItem)


add_like_routes(
    comment_router,
    label="comment",
    get_procedures=get_comment_procedures,
    likes_schema=CommentLikesItem,
)
add_crud_routes(
    comment_router,
    label="comment",
    get_procedures=get_comment_procedures,
    item_schema=CommentItem,
    create_schema=CreateCommentRequest,
    update_schema=UpdateCommentRequest,
    to_command=lambda body: CreateCommentCommand(**body.model_dump()),
    to_update_command=lambda body: UpdateCommentCommand(**body.model_dump()),
)
