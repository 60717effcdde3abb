"""
Application layer package.

Contains procedures that orchestrate domain logic.
This layer depends on domain ports, never on infrastructure.
"""
