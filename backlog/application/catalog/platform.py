"""Procedures: Platforms."""

from backlog.application.catalog.linked import GameLinkedProcedures
from backlog.domain.catalog.entities import Platform


class PlatformProcedures(GameLinkedProcedures[Platform]):
    entity_name = "Platform"
