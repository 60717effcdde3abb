"""
Authorization gate.

Every procedure calls into the gate before touching storage. Gate
failures are raised (UnauthorizedError / ForbiddenError), never returned
as a Result, so they short-circuit the procedure.
"""

import logging
from enum import Enum
from typing import Optional

from backlog.domain.catalog.entities import Role, Session
from backlog.domain.catalog.errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)


class ReadAccess(Enum):
    """Who may call the read procedures of a procedure set."""

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


def require_session(session: Optional[Session]) -> Session:
    """Return the session, or raise UnauthorizedError when there is none."""
    if session is None:
        logger.warning("Rejected anonymous caller")
        raise UnauthorizedError()
    return session


def require_role(session: Optional[Session], role: Role) -> Session:
    """Return the session if it carries ``role``.

    Raises:
        UnauthorizedError: No session.
        ForbiddenError: The session has another role.
    """
    session = require_session(session)
    if session.role is not role:
        logger.warning("Rejected user %s: role %s, needs %s", session.user_id, session.role.value, role.value)
        raise ForbiddenError()
    return session


def require_read_access(session: Optional[Session], access: ReadAccess) -> Optional[Session]:
    """Apply a read policy. Public reads let anonymous callers through."""
    if access is ReadAccess.AUTHENTICATED:
        return require_session(session)
    return session


def require_owner_or_admin(session: Session, owner_id: str) -> Session:
    """Allow the owner of a resource, or any Admin."""
    if session.is_admin or session.user_id == owner_id:
        return session
    logger.warning("Rejected user %s: not the owner", session.user_id)
    raise ForbiddenError("Only the owner or an admin can change this.")
