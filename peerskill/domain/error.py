"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing or malformed input, or a violated business rule."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when creating a resource that already exists."""

    pass


class AuthError(DomainError):
    """Bad credentials or a missing, invalid or expired token."""

    pass


class ForbiddenError(DomainError):
    """Caller identity or role does not permit the operation."""

    pass


class StoreError(DomainError):
    """Underlying persistence failure."""

    pass
