"""Procedures: Reviews. Public reads; owner or Admin writes; likes."""

from backlog.application.catalog.owned import OwnedCrudProcedures
from backlog.domain.catalog.entities import Review


class ReviewProcedures(OwnedCrudProcedures[Review]):
    entity_name = "Review"
