class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NoActiveSession(DomainError):
    """Raised when the caller has no resolvable employee identity."""


class AlreadyComplete(DomainError):
    """Raised when all four checkpoints of the day are already punched."""


class StoreConflict(DomainError):
    """Raised by a store when a concurrent write already filled the target."""


class AuthorizationError(DomainError):
    """Raised when the signed-in employee may not review requests."""
