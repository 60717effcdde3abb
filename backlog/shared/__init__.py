"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Result type
- Error normalization and HTTP mapping
- Security middleware
- Rate limiting
- Logging configuration
"""
