"""
Application layer for the catalog bounded context.

Procedures check the caller against the authorization gate, call a
repository port and wrap the outcome in a Result.
"""
