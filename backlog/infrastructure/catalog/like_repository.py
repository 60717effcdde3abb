"""
Adapter: Per-user likes.

Mixin implementing the LikeRepository port over any like table keyed
by (target, user). Shared by playlists, reviews and comments.
"""

from sqlalchemy import Column, Table, delete, func, insert, select

from backlog.domain.catalog.ports import LikeRepository
from backlog.infrastructure.catalog.tables import utcnow


class SqlLikesMixin(LikeRepository):
    """Likes stored in ``_like_table``; ``_like_column`` names the target."""

    _like_table: Table
    _like_column: str

    @property
    def _target(self) -> Column:
        return self._like_table.c[self._like_column]

    def add_like(self, target_id: str, user_id: str) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                insert(self._like_table).values(
                    {self._like_column: target_id, "user_id": user_id, "created_at": utcnow()}
                )
            )

    def remove_like(self, target_id: str, user_id: str) -> int:
        with self._engine.begin() as conn:
            result = conn.execute(
                delete(self._like_table).where(
                    self._target == target_id,
                    self._like_table.c.user_id == user_id,
                )
            )
        return result.rowcount

    def count_likes(self, target_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(self._like_table)
            .where(self._target == target_id)
        )
        with self._engine.connect() as conn:
            return conn.execute(stmt).scalar_one()
