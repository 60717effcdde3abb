"""
Shared error handling package.

Centralizes error-to-HTTP mapping and the normalization of storage
exceptions into Result failures.
"""
