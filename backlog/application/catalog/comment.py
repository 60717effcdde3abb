"""
Procedures: Comments.

Comments live on a review and may reply to another comment. They are
backed by a soft-delete repository, so ``delete`` only stamps the row and
stamped comments disappear from every read.
"""

from typing import Optional

from backlog.application.catalog.authorization import require_read_access
from backlog.application.catalog.base import guarded
from backlog.application.catalog.dtos import CommentDetails
from backlog.application.catalog.owned import OwnedCrudProcedures
from backlog.domain.catalog.entities import Comment, Session
from backlog.domain.catalog.ports import CommentRepository
from backlog.shared.result import Ok, Result


class CommentProcedures(OwnedCrudProcedures[Comment]):
    entity_name = "Comment"

    def __init__(self, repository: CommentRepository) -> None:
        super().__init__(repository)
        self._comments = repository

    def get_details(self, session: Optional[Session], comment_id: str) -> Result[CommentDetails]:
        """Return the comment with its like count, parent and direct replies."""
        require_read_access(session, self.read_access)

        def run() -> Result[CommentDetails]:
            comment = self._comments.find_unique(comment_id)
            if comment is None:
                return self._not_found()
            parent = (
                self._comments.find_unique(comment.parent_id)
                if comment.parent_id is not None
                else None
            )
            return Ok(
                CommentDetails(
                    comment=comment,
                    like_count=self._comments.count_likes(comment_id),
                    parent=parent,
                    replies=self._comments.find_many(parent_id=comment_id),
                )
            )

        return guarded(run)
