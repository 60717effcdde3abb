"""
Infrastructure adapters for the catalog bounded context.

Each repository implements a domain port on top of SQLAlchemy Core.
"""
