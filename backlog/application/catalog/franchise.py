"""
Procedures: Franchises.

Unlike the rest of the catalog, franchise reads require a signed-in caller.
"""

from backlog.application.catalog.authorization import ReadAccess
from backlog.application.catalog.base import CrudProcedures
from backlog.domain.catalog.entities import Franchise


class FranchiseProcedures(CrudProcedures[Franchise]):
    """CRUD over franchises. Admin-only writes, authenticated reads."""

    entity_name = "Franchise"
    read_access = ReadAccess.AUTHENTICATED
