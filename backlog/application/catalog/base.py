"""
Shared CRUD procedures.

Input: a caller session (or None) and a command / identifier.
Output: Result[entity] or Result[list[entity]].
Side effects: storage writes for create / update / delete.
Failure cases:
    - Gate rejection → UnauthorizedError / ForbiddenError raised.
    - Missing row → Err(NOT_FOUND).
    - Storage failure → Err from the storage error normalizer.
"""

import logging
from dataclasses import asdict
from typing import Any, Callable, Generic, Optional, TypeVar

from backlog.application.catalog.authorization import (
    ReadAccess,
    require_read_access,
    require_role,
)
from backlog.domain.catalog.entities import Role, Session
from backlog.domain.catalog.ports import EntityRepository
from backlog.shared.errors.normalizer import handle_storage_error
from backlog.shared.result import Ok, Result, not_found

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def guarded(operation: Callable[[], Result[R]]) -> Result[R]:
    """Run a storage operation, turning anything it raises into an Err."""
    try:
        return operation()
    except Exception as err:
        return handle_storage_error(err)


class CrudProcedures(Generic[T]):
    """create / get_by_id / get_all / update / delete for one entity type.

    Subclasses set ``entity_name`` and, where needed, ``read_access``.
    Mutations always require an Admin session.
    """

    entity_name = "Entity"
    read_access = ReadAccess.PUBLIC
    write_role = Role.ADMIN

    def __init__(self, repository: EntityRepository[T]) -> None:
        """Initialize the procedures.

        Args:
            repository: Storage port for the entity.
        """
        self._repository = repository

    def _not_found(self):
        return not_found(f"{self.entity_name} not found")

    def _found(self, entity: Optional[T]) -> Result[T]:
        return Ok(entity) if entity is not None else self._not_found()

    def _values(self, command: Any) -> dict[str, Any]:
        return asdict(command)

    def create(self, session: Optional[Session], command: Any) -> Result[T]:
        require_role(session, self.write_role)
        logger.info("Creating %s", self.entity_name)
        return guarded(lambda: Ok(self._repository.create(self._values(command))))

    def get_by_id(self, session: Optional[Session], entity_id: str) -> Result[T]:
        require_read_access(session, self.read_access)
        return guarded(lambda: self._found(self._repository.find_unique(entity_id)))

    def get_all(self, session: Optional[Session]) -> Result[list[T]]:
        require_read_access(session, self.read_access)
        return guarded(lambda: Ok(self._repository.find_many()))

    def update(self, session: Optional[Session], entity_id: str, command: Any) -> Result[T]:
        require_role(session, self.write_role)
        logger.info("Updating %s %s", self.entity_name, entity_id)
        return guarded(
            lambda: self._found(self._repository.update(entity_id, self._values(command)))
        )

    def delete(self, session: Optional[Session], entity_id: str) -> Result[T]:
        require_role(session, self.write_role)
        logger.info("Deleting %s %s", self.entity_name, entity_id)
        return guarded(lambda: self._found(self._repository.delete(entity_id)))
