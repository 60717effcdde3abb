"""Procedures: Genres."""

from backlog.application.catalog.linked import GameLinkedProcedures
from backlog.domain.catalog.entities import Genre


class GenreProcedures(GameLinkedProcedures[Genre]):
    entity_name = "Genre"
