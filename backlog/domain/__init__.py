"""
Domain layer package.

Contains pure business logic: entities, value objects, sessions
and port interfaces. No framework imports, no IO, no side effects.
"""
