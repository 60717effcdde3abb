"""
Domain-specific errors for the catalog bounded context.

Only the authorization gate raises these. Every other failure travels
as a Result. They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnauthorizedError(CatalogDomainError):
    """Raised when a procedure needs a session and the caller has none."""

    def __init__(self, message: str = "You must be signed in to do this.") -> None:
        super().__init__(message)


class ForbiddenError(CatalogDomainError):
    """Raised when the caller's role or ownership does not allow the action."""

    def __init__(self, message: str = "You are not allowed to do this.") -> None:
        super().__init__(message)
