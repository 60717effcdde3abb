"""Procedures: Developers and the games they worked on."""

from backlog.application.catalog.linked import GameLinkedProcedures
from backlog.domain.catalog.entities import Developer


class DeveloperProcedures(GameLinkedProcedures[Developer]):
    entity_name = "Developer"
