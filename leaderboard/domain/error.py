"""Domain layer errors.

Every failure surfaced to callers is a ``DomainError`` subclass. The
``category`` names the status category reported alongside the message.
"""


class DomainError(Exception):
    """Base domain error."""

    category = "internal"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(DomainError):
    """Missing or malformed request field."""

    category = "invalid_input"


class UnauthenticatedError(DomainError):
    """Raised when an operation requires an actor and none was resolved."""

    category = "unauthenticated"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    category = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(DomainError):
    """Raised when a unique field is already taken."""

    category = "conflict"


class InternalError(DomainError):
    """Storage failure or inconsistent write."""

    category = "internal"
