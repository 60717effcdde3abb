"""Procedures: Publishers. Public reads, admin-only writes."""

from backlog.application.catalog.base import CrudProcedures
from backlog.domain.catalog.entities import Publisher


class PublisherProcedures(CrudProcedures[Publisher]):
    entity_name = "Publisher"
