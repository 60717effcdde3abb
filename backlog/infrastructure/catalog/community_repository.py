"""
Adapter: Review and comment persistence.

Reviews are hard-deleted, comments soft-deleted; both carry likes.
"""

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from backlog.domain.catalog.entities import Comment, Review
from backlog.domain.catalog.ports import CommentRepository, ReviewRepository
from backlog.infrastructure.catalog.like_repository import SqlLikesMixin
from backlog.infrastructure.catalog.sql_repository import SoftDeleteSqlRepository, SqlRepository
from backlog.infrastructure.catalog.tables import comment_likes, comments, review_likes, reviews


class ReviewRepositoryAdapter(SqlLikesMixin, SqlRepository[Review], ReviewRepository):
    _like_table = review_likes
    _like_column = "review_id"

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine, reviews, Review)

    def find_top_for_game(self, game_id: str, limit: int) -> list[Review]:
        likes = (
            select(review_likes.c.review_id, func.count().label("likes"))
            .group_by(review_likes.c.review_id)
            .subquery()
        )
        stmt = (
            select(reviews)
            .outerjoin(likes, likes.c.review_id == reviews.c.id)
            .where(reviews.c.game_id == game_id)
            .order_by(
                func.coalesce(likes.c.likes, 0).desc(),
                reviews.c.created_at.desc(),
                reviews.c.id,
            )
            .limit(limit)
        )
        with self._engine.connect() as conn:
            return [self._to_entity(row) for row in conn.execute(stmt)]


class CommentRepositoryAdapter(SqlLikesMixin, SoftDeleteSqlRepository[Comment], CommentRepository):
    _like_table = comment_likes
    _like_column = "comment_id"

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine, comments, Comment)
