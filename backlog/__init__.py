"""
Backlog: personal game backlog tracker.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - catalog: Franchises, publishers, developers, games, playlists,
      reviews and comments.

Layers:
    - domain: Entities, ports (ABCs), errors, sessions and roles.
    - application: Procedures (use cases), authorization gate, DTOs.
    - infrastructure: SQLAlchemy tables, storage client, repositories.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (results, errors, security, logging).
"""
