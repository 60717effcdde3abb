"""
Procedures for user-owned content (reviews, comments).

Any signed-in caller may create; the row records them as owner.
Only the owner or an Admin may update or delete. Any signed-in caller
may like or unlike, once per row.
"""

import logging
from dataclasses import asdict
from typing import Any, Optional, TypeVar

from backlog.application.catalog.authorization import require_owner_or_admin, require_session
from backlog.application.catalog.base import CrudProcedures, guarded
from backlog.application.catalog.dtos import LikeSummary
from backlog.domain.catalog.entities import Session
from backlog.shared.result import Err, Ok, Result, not_found

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OwnedCrudProcedures(CrudProcedures[T]):
    """CRUD where writes are gated by ownership instead of role.

    The repository must also implement the LikeRepository port.
    """

    def create(self, session: Optional[Session], command: Any) -> Result[T]:
        session = require_session(session)
        values = {**asdict(command), "user_id": session.user_id}
        logger.info("Creating %s for user %s", self.entity_name, session.user_id)
        return guarded(lambda: Ok(self._repository.create(values)))

    def update(self, session: Optional[Session], entity_id: str, command: Any) -> Result[T]:
        session = require_session(session)
        owned = self._owned(session, entity_id)
        if isinstance(owned, Err):
            return owned
        return guarded(
            lambda: self._found(self._repository.update(entity_id, self._values(command)))
        )

    def delete(self, session: Optional[Session], entity_id: str) -> Result[T]:
        session = require_session(session)
        owned = self._owned(session, entity_id)
        if isinstance(owned, Err):
            return owned
        logger.info("Deleting %s %s", self.entity_name, entity_id)
        return guarded(lambda: self._found(self._repository.delete(entity_id)))

    def like(self, session: Optional[Session], entity_id: str) -> Result[LikeSummary]:
        """Record the caller's like. Liking twice is a BAD_REQUEST."""
        session = require_session(session)

        def run() -> Result[LikeSummary]:
            entity = self._repository.find_unique(entity_id)
            if entity is None:
                return self._not_found()
            self._repository.add_like(entity_id, session.user_id)
            return Ok(self._summary(entity))

        return guarded(run)

    def unlike(self, session: Optional[Session], entity_id: str) -> Result[LikeSummary]:
        session = require_session(session)

        def run() -> Result[LikeSummary]:
            entity = self._repository.find_unique(entity_id)
            if entity is None:
                return self._not_found()
            if self._repository.remove_like(entity_id, session.user_id) == 0:
                return not_found("Like not found")
            return Ok(self._summary(entity))

        return guarded(run)

    def _summary(self, entity: T) -> LikeSummary:
        return LikeSummary(entity=entity, like_count=self._repository.count_likes(entity.id))

    def _owned(self, session: Session, entity_id: str) -> Result[T]:
        found = guarded(lambda: self._found(self._repository.find_unique(entity_id)))
        if isinstance(found, Ok):
            require_owner_or_admin(session, found.value.user_id)
        return found
