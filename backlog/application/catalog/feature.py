"""Procedures: Features (co-op, cross-save and the like)."""

from backlog.application.catalog.linked import GameLinkedProcedures
from backlog.domain.catalog.entities import Feature


class FeatureProcedures(GameLinkedProcedures[Feature]):
    entity_name = "Feature"
